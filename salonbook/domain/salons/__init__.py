"""Salons Domain - public booking page data, professional agenda and deactivation"""
