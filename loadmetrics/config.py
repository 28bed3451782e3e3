"""Configuration constants for training load computation."""

# TRIMP constants (Bannister's Training Impulse)
# Sex-specific exponential weighting factor
TRIMP_FACTOR_MALE = 1.92
TRIMP_FACTOR_FEMALE = 1.67

# Linear weighting applied to the HR reserve fraction
TRIMP_INTENSITY_WEIGHT = 0.64

# Exponential moving average time constants (days)
# ACL (Acute Training Load) - 7 day time constant
# Formula: new_acl = old_acl + (today_trimp - old_acl) / ACUTE_TIME_CONSTANT
ACUTE_TIME_CONSTANT = 7

# CTL (Chronic Training Load) uses the mesocycle length as its time constant.
# 42 days is the classic Performance Management Chart window.
DEFAULT_MESOCYCLE_LENGTH = 42

# Mesocycle bounds offered in the app settings (advisory, not enforced)
MIN_MESOCYCLE_LENGTH = 14
MAX_MESOCYCLE_LENGTH = 100

# Age-based max HR estimate: max_hr = MAX_HR_AGE_BASE - age
MAX_HR_AGE_BASE = 220

# Form interpretation of TSB (lower bound exclusive, status, description)
# Checked top to bottom; anything below the last bound is "Very Fatigued".
TSB_FORM_BANDS = [
    (25, "Very Fresh", "Well recovered, ready for hard efforts"),
    (5, "Fresh", "Good form for quality training"),
    (-10, "Neutral", "Balanced training load"),
    (-25, "Fatigued", "Accumulated fatigue, consider recovery"),
]
TSB_FORM_FLOOR = ("Very Fatigued", "High fatigue, prioritize rest")
