"""Bookstore core: models, repositories and configuration"""
