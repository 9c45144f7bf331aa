"""
API request / response models
"""
