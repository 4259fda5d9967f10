# daily_challenges/services/__init__.py
