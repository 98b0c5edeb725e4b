# tgpp_guidance/knowledge/errors.py
"""Errors raised while building the knowledge graph."""


class KnowledgeBaseError(Exception):
    """Knowledge graph could not be built; the server cannot start."""

    def __init__(self, message: str, table: str = None):
        super().__init__(message)
        self.table = table
