"""Utility helpers: logging/alerts and palette configuration files"""
