"""Утиліти Webhook Inspector для наповнення бази тестовими вебхуками."""
