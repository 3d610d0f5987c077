"""メッセージの翻訳と表示名の解決。"""
