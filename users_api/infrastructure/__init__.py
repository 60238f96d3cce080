"""Infrastructure layer - MongoDB client, repositories and id parsing"""
