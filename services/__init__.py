"""
Review Hub - Services
Review repository, catalog fixtures and identity provider
"""
