"""レコード評価エンジン。"""
