"""Appointments Domain - booking transaction, lifecycle actions and deletion"""
