"""SistemaExperto — Sistema de recomendaciones (exámenes y tratamientos)"""
from .recommender import RecommendationEngine, unique

__all__ = [
    "RecommendationEngine",
    "unique",
]
