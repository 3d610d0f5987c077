"""サービス層。"""
