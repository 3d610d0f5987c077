"""制約宣言の解析。"""
