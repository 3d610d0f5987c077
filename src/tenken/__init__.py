"""宣言的なレコードバリデーションとロケール別エラーメッセージ。"""
