"""Billing Domain - subscription entitlement lookups"""
