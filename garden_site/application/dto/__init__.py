"""Request and response DTOs"""
