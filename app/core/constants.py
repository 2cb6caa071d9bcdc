"""Application constants."""

# Brzycki is undefined at 37 reps and meaningless beyond
BRZYCKI_MAX_REPS = 37

# Workout stats
RECENT_RECORDS_LIMIT = 5
FAVORITE_EXERCISES_LIMIT = 5
WEEK_WINDOW_DAYS = 7
MONTH_WINDOW_DAYS = 30

# Exercise progress
EXERCISE_RECENT_RECORDS_LIMIT = 3
TREND_WINDOW = 3  # entries compared on each side
TREND_THRESHOLD_PERCENT = 5.0

# Frequency chart
DEFAULT_FREQUENCY_DAYS = 30
