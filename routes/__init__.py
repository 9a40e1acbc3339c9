"""
Review Hub - HTTP Blueprints
"""
