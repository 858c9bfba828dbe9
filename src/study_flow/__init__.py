"""StudyFlow exam preparation planner."""
