"""tenkenのデータモデル。"""
