"""Field-name and enum constants"""
