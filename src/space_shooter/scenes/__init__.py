"""
Space Shooter scenes
"""
