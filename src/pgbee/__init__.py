"""PgBee performance leaderboard"""
