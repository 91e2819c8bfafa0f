# settings.py
# App-wide constants. Kept in code, there is nothing to configure per deploy.

APP_TITLE = "Resume Screening App"
PAGE_ICON = "📄"
TAGLINE = "\"Your resume speaks before you do – let's ensure it says the right things!\""

# Only a picker filter, uploaded content is never inspected
ACCEPTED_TYPES = ["pdf"]

# ---------------- Scoring ----------------
BASE_SCORE = 50
POINTS_PER_MATCH = 10
MAX_SCORE = 100

EXCELLENT_THRESHOLD = 90
GOOD_THRESHOLD = 70

SUGGESTION_EXCELLENT = "Excellent match!"
SUGGESTION_GOOD = "Good match. Add more relevant keywords."
SUGGESTION_TAILOR = "Consider tailoring your resume to the job title."

# ---------------- Results ----------------
RANK_MARKERS = {1: "🥇", 2: "🥈", 3: "🥉"}
EMPTY_RESULTS_MESSAGE = "No resumes uploaded. Please go back and upload resumes."
CSV_FILE_NAME = "resume_rankings.csv"

# ---------------- Prompts ----------------
MISSING_JD_PROMPT = "Please upload a Job Description first!"
MISSING_INPUTS_PROMPT = "Please upload resumes and a job description!"
