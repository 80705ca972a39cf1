from .profile import UserProfile, build_user_profile
from .similarity import normalize_skill_label, score_career

__all__ = ["UserProfile", "build_user_profile", "normalize_skill_label", "score_career"]
