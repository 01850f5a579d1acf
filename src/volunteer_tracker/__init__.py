"""Volunteer attendance tracker.

This package is organized by feature modules (volunteers, game_dates,
attendance, checkin) with a thin Flask controller layer on top of
service/repository layers.
"""
