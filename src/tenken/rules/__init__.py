"""ルールの登録と組み込みルール。"""
