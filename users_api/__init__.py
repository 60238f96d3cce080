"""Users API - HTTP CRUD service for user records stored in MongoDB"""
