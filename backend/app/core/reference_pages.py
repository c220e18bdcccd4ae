"""Reference Pages — the fixed registry of admin-editable SwiftUI reference pages.

Invariants:
    - PAGES is the single source of valid page ids (unknown id → 404 at the API layer)
    - default_page_content is pure and total over PAGES keys

Design Decisions:
    - Defaults live in code, not in the DB: the store persists a default only on first read
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class PageConfig:
    title: str
    file: str


PAGES: dict[str, PageConfig] = {
    "home": PageConfig("ホーム", "Home.js"),
    "basic-types": PageConfig("基本データ型", "BasicTypes.js"),
    "views": PageConfig("ビュー", "Views.js"),
    "modifiers": PageConfig("モディファイア", "Modifiers.js"),
    "layout": PageConfig("レイアウト", "Layout.js"),
    "navigation": PageConfig("ナビゲーション", "Navigation.js"),
    "data-flow": PageConfig("データフロー", "DataFlow.js"),
    "animation": PageConfig("アニメーション", "Animation.js"),
    "gestures": PageConfig("ジェスチャー", "Gestures.js"),
    "drawing": PageConfig("描画とグラフィックス", "Drawing.js"),
    "performance": PageConfig("パフォーマンス最適化", "Performance.js"),
    "testing": PageConfig("テストとデバッグ", "Testing.js"),
}


def is_known_page(page_id: str) -> bool:
    return page_id in PAGES


def default_page_content(page_id: str) -> str:
    """Built-in markdown for a page; templated placeholder when none is authored."""
    if page_id in _DEFAULT_CONTENTS:
        return _DEFAULT_CONTENTS[page_id]
    config = PAGES.get(page_id)
    title = config.title if config else "新しいページ"
    return _TEMPLATE.format(title=title)


_TEMPLATE = """# {title}

ここにコンテンツを追加してください。

## セクション例

### サブセクション

テキストの例です。

```swift
// コード例
struct ExampleView: View {{
    var body: some View {{
        Text("例")
    }}
}}
```

> **💡 ヒント**
> ここにヒントを書きます。"""


_HOME = """# SwiftUI リファレンス

SwiftUIは、Appleが開発した宣言的なユーザーインターフェースフレームワークです。
iOS、macOS、watchOS、tvOSアプリケーションの開発に使用され、
直感的で効率的なUI構築を可能にします。

## このリファレンスについて

このリファレンスは、SwiftUIを使用したiOSアプリ開発の包括的なガイドです。
基本的な概念から高度なテクニックまで、実用的なコード例とともに解説しています。

> **📱 対象バージョン**
> このリファレンスは iOS 15.0+ / SwiftUI 3.0+ を対象としています。

## 主要なトピック

### 📱 ビューとUI
Text、Image、Button などの基本的なビューコンポーネントと、それらを組み合わせてUIを構築する方法を学びます。

### 📐 レイアウト
VStack、HStack、ZStack を使用したレイアウト設計と、複雑なUI構造の構築方法を解説します。

### 🔄 データフロー
@State、@Binding、@ObservedObject などの状態管理とデータバインディングの仕組みを理解します。

### ✨ アニメーション
SwiftUIの強力なアニメーション機能を使用して、魅力的でインタラクティブなUIを作成する方法を学びます。

## 基本的な例

以下は、SwiftUIの基本的な「Hello, World!」アプリの例です：

```swift
import SwiftUI

struct ContentView: View {
    var body: some View {
        VStack {
            Text("Hello, World!")
                .font(.largeTitle)
                .foregroundColor(.blue)

            Button("タップしてください") {
                print("ボタンがタップされました")
            }
            .padding()
            .background(Color.blue)
            .foregroundColor(.white)
            .cornerRadius(10)
        }
        .padding()
    }
}
```

## 学習の進め方

1. **基本概念**から始めて、SwiftUIの基礎を理解する
2. **ビューとUI**で基本的なコンポーネントを学ぶ
3. **レイアウト**でUI構造の設計方法を習得する
4. **データフロー**で状態管理を理解する
5. **アニメーション**と**ジェスチャー**でインタラクティブなUIを作成する

> **⚠️ 注意**
> SwiftUIは比較的新しいフレームワークのため、頻繁にアップデートされます。
> 最新の情報については、Apple公式ドキュメントも併せて参照してください。"""


_BASIC_TYPES = """# 基本データ型

SwiftUIアプリケーションで使用される基本的なデータ型について説明します。
これらの型を理解することで、効果的なSwiftUIアプリを構築できます。

## String（文字列）

文字列は、テキストデータを表現するために使用されます。
SwiftUIでは、`Text`ビューで文字列を表示します。

```swift
struct ContentView: View {
    let greeting = "こんにちは、SwiftUI！"

    var body: some View {
        VStack {
            Text(greeting)
            Text("直接文字列を指定")
            Text("\\(greeting) - 文字列補間")
        }
    }
}
```

## Int（整数）

整数値を表現するために使用されます。カウンターやインデックスなどに使用されます。

```swift
struct CounterView: View {
    @State private var count = 0

    var body: some View {
        VStack {
            Text("カウント: \\(count)")

            Button("増加") {
                count += 1
            }

            Button("リセット") {
                count = 0
            }
        }
    }
}
```

## Bool（真偽値）

真（true）または偽（false）の値を表現します。
条件分岐やトグルスイッチなどに使用されます。

```swift
struct ToggleView: View {
    @State private var isOn = false

    var body: some View {
        VStack {
            Toggle("設定", isOn: $isOn)
                .padding()

            if isOn {
                Text("設定がオンです")
                    .foregroundColor(.green)
            } else {
                Text("設定がオフです")
                    .foregroundColor(.red)
            }
        }
    }
}
```"""


_PERFORMANCE = """# パフォーマンス最適化

SwiftUIアプリのパフォーマンスを向上させるためのテクニックとベストプラクティスについて説明します。

## 基本的な最適化

### ビューの最適化

```swift
struct OptimizedView: View {
    var body: some View {
        // 最適化されたビューの実装
        Text("パフォーマンス最適化")
    }
}
```

> 💡 ビューの再描画を最小限に抑えることが重要です。"""


_TESTING = """# テストとデバッグ

SwiftUIアプリのテストとデバッグ手法について説明します。

## 単体テスト

### ビューのテスト

```swift
import XCTest
@testable import YourApp

class ViewTests: XCTestCase {
    func testViewRendering() {
        // テストの実装
    }
}
```

## デバッグ技術

### プレビューでのデバッグ

```swift
struct ContentView_Previews: PreviewProvider {
    static var previews: some View {
        ContentView()
            .previewDisplayName("デバッグ用")
    }
}
```

> 💡 Xcodeのプレビュー機能を活用してリアルタイムでデバッグしましょう。"""


_DEFAULT_CONTENTS: dict[str, str] = {
    "home": _HOME,
    "basic-types": _BASIC_TYPES,
    "performance": _PERFORMANCE,
    "testing": _TESTING,
}
