"""Dependency injection container"""
