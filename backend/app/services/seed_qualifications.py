"""Qualification Seeding — the official qualification catalogue.

Invariants:
    - Idempotent: only official entries missing by name are inserted
    - Never deletes rows (user qualifications and study records reference them)
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import QualificationCategory as Category, Difficulty
from app.models.qualification import Qualification

logger = logging.getLogger(__name__)


OFFICIAL_QUALIFICATIONS: list[dict] = [
    # IT
    {"name": "基本情報技術者試験", "category": Category.IT, "difficulty": Difficulty.INTERMEDIATE,
     "description": "ITエンジニアとしての基本的な知識・技能を問う国家試験"},
    {"name": "応用情報技術者試験", "category": Category.IT, "difficulty": Difficulty.ADVANCED,
     "description": "高度IT人材となるために必要な応用的知識・技能を問う国家試験"},
    {"name": "AWS認定ソリューションアーキテクト", "category": Category.IT, "difficulty": Difficulty.ADVANCED,
     "description": "AWSクラウドでのソリューション設計能力を証明する認定資格"},
    {"name": "Oracle Java SE 11 認定資格", "category": Category.IT, "difficulty": Difficulty.INTERMEDIATE,
     "description": "Java SE 11の知識とスキルを証明するOracle認定資格"},
    # Business
    {"name": "日商簿記検定2級", "category": Category.BUSINESS, "difficulty": Difficulty.INTERMEDIATE,
     "description": "商業簿記・工業簿記の基本的な知識を問う検定試験"},
    {"name": "中小企業診断士", "category": Category.BUSINESS, "difficulty": Difficulty.EXPERT,
     "description": "経営コンサルタントの国家資格"},
    {"name": "宅地建物取引士", "category": Category.BUSINESS, "difficulty": Difficulty.ADVANCED,
     "description": "不動産取引の専門家としての国家資格"},
    # Language
    {"name": "TOEIC L&R", "category": Category.LANGUAGE, "difficulty": Difficulty.INTERMEDIATE,
     "description": "英語によるコミュニケーション能力を測定するテスト"},
    {"name": "英検準1級", "category": Category.LANGUAGE, "difficulty": Difficulty.ADVANCED,
     "description": "実用英語技能検定準1級"},
    {"name": "日本語能力試験N1", "category": Category.LANGUAGE, "difficulty": Difficulty.EXPERT,
     "description": "日本語を母語としない人の日本語能力を測定するテスト"},
    # Finance
    {"name": "FP技能士2級", "category": Category.FINANCE, "difficulty": Difficulty.INTERMEDIATE,
     "description": "ファイナンシャル・プランニング技能検定2級"},
    {"name": "証券外務員一種", "category": Category.FINANCE, "difficulty": Difficulty.INTERMEDIATE,
     "description": "証券業務に従事するための資格"},
    # Medical
    {"name": "医療事務技能審査試験", "category": Category.MEDICAL, "difficulty": Difficulty.BEGINNER,
     "description": "医療事務の基本的な知識・技能を問う試験"},
    # Legal
    {"name": "行政書士", "category": Category.LEGAL, "difficulty": Difficulty.ADVANCED,
     "description": "行政手続きの専門家としての国家資格"},
    # Engineering
    {"name": "第二種電気工事士", "category": Category.ENGINEERING, "difficulty": Difficulty.INTERMEDIATE,
     "description": "一般住宅や店舗などの電気工事を行うための国家資格"},
]


async def seed_official_qualifications(db: AsyncSession) -> int:
    """Insert missing official qualifications. Returns the number inserted."""
    result = await db.execute(
        select(Qualification.name).where(Qualification.is_official.is_(True)),
    )
    existing = set(result.scalars().all())
    missing = [q for q in OFFICIAL_QUALIFICATIONS if q["name"] not in existing]
    for entry in missing:
        db.add(Qualification(
            name=entry["name"],
            category=entry["category"].value,
            difficulty=entry["difficulty"].value,
            description=entry["description"],
            is_official=True,
        ))
    if missing:
        await db.commit()
    logger.info(f"Seeded {len(missing)} official qualifications")
    return len(missing)
