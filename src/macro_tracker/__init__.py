"""Calorie and macro tracking service."""
