"""Application layer - Use cases"""
