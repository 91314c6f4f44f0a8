"""Fixed policy values shared by the allowance calculators."""

BUDDHIST_ERA_OFFSET = 543

# Service-year anniversaries that qualify for the travel reimbursement
MILESTONE_SERVICE_YEARS = (20, 25, 30, 35, 40)

# Job level of the top-level manager
TOP_LEVEL_CODE = "7"

FAMILY_VISIT_TRIPS_PER_YEAR = 4
MONTHS_PER_YEAR = 12

# Hourly overtime rate defaults to salary / OVERTIME_HOURLY_DIVISOR
OVERTIME_HOURLY_DIVISOR = 210
DEFAULT_OVERTIME_SALARY = 15000.0

# Buddhist-era years offered for budgeting; budget lines get a value for each
BUDGET_YEARS = range(2568, 2581)

UNSPECIFIED_POSITION = "unspecified"

SPECIAL_HOLIDAY_MARKERS = ("วันหยุดพิเศษ", "special holiday")
COMPENSATORY_HOLIDAY_MARKERS = ("ชดเชย", "compensatory")

# Room-pair tags, reused in order once exhausted
PAIR_TAGS = ("🔵", "🔴", "🟢", "🟡", "🟣", "🟠", "⚫", "⚪")

NOTE_SINGLE_ROOM = "single room"
NOTE_NO_PAIR = "no pair - single room"
NOTE_NOT_ELIGIBLE = "not eligible for accommodation"
