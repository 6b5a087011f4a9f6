"""
Job Finder API Backend.

Core components:
- search: Gateway to the external job-search provider
- db: Application records and their store
- api: HTTP routes for job search and application history
"""
