from .assessment import AssessmentQuestion, AssessmentSubmission, PersonalityAssessment
from .career import CareerCreate, CareerRecord
from .dashboard import DashboardStats
from .journal import JournalEntry, JournalEntryCreate, Mood
from .recommendation import Recommendation, RecommendationWithCareer, ScoredCareer
from .traits import TRAIT_NAMES, TraitName, TraitVector
from .user import User, UserUpsert

__all__ = [
    "AssessmentQuestion",
    "AssessmentSubmission",
    "PersonalityAssessment",
    "CareerCreate",
    "CareerRecord",
    "DashboardStats",
    "JournalEntry",
    "JournalEntryCreate",
    "Mood",
    "Recommendation",
    "RecommendationWithCareer",
    "ScoredCareer",
    "TRAIT_NAMES",
    "TraitName",
    "TraitVector",
    "User",
    "UserUpsert",
]
