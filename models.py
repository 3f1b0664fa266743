import datetime as dt
from pydantic import BaseModel, Field
from typing import List, Optional, Dict, Union, Literal

Difficulty = Literal["beginner", "intermediate", "advanced"]
MealType = Literal["breakfast", "lunch", "dinner", "snack"]
DeviceType = Literal["oura", "whoop", "garmin", "apple_watch", "fitbit", "polar"]

# --- AUTH ---
class RegisterRequest(BaseModel):
    username: str = Field(min_length=3)
    password: str = Field(min_length=6)
    email: Optional[str] = None
    full_name: Optional[str] = None

class LoginRequest(BaseModel):
    username: str
    password: str

class TokenResponse(BaseModel):
    access_token: str
    token_type: str
    role: str
    user_id: str

# --- EXERCISES ---
class ExerciseCreate(BaseModel):
    name: str = Field(min_length=1)
    description: Optional[str] = None
    category: Optional[str] = None
    muscle_groups: List[str] = []
    secondary_muscle_groups: List[str] = []
    difficulty: Difficulty = "intermediate"
    equipment: List[str] = []
    is_compound: bool = False
    image_url: Optional[str] = None
    video_url: Optional[str] = None
    instructions: Optional[str] = None
    tips: Optional[str] = None

class ExerciseUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    category: Optional[str] = None
    muscle_groups: Optional[List[str]] = None
    secondary_muscle_groups: Optional[List[str]] = None
    difficulty: Optional[Difficulty] = None
    equipment: Optional[List[str]] = None
    is_compound: Optional[bool] = None
    image_url: Optional[str] = None
    video_url: Optional[str] = None
    instructions: Optional[str] = None
    tips: Optional[str] = None

# --- ROUTINES ---
class RoutineExercise(BaseModel):
    exercise_id: Optional[str] = None
    name: str
    sets: int = 3
    reps: Union[str, int] = "8-12"
    rest: int = 90  # seconds
    weight: Optional[float] = None
    notes: Optional[str] = None

class WorkoutDay(BaseModel):
    id: Optional[str] = None
    name: str
    description: Optional[str] = None
    exercises: List[RoutineExercise] = []

class WorkoutDayUpdate(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    exercises: Optional[List[RoutineExercise]] = None

class WorkoutRoutine(BaseModel):
    id: Optional[str] = None
    name: str = Field(min_length=1)
    description: Optional[str] = None
    level: str = "beginner"
    goal: str = "general"
    frequency: str = "3-4 days per week"
    days: List[WorkoutDay] = []
    is_active: bool = True

# --- WORKOUT LOGS ---
class LoggedSet(BaseModel):
    reps: int = Field(ge=0)
    weight: float = Field(default=0, ge=0)
    rpe: Optional[float] = Field(default=None, ge=0, le=10)
    rir: Optional[float] = Field(default=None, ge=0, le=5)

class LoggedExercise(BaseModel):
    name: str
    exercise_id: Optional[str] = None
    muscle_groups: List[str] = []
    sets: List[LoggedSet] = []

class WorkoutLogCreate(BaseModel):
    routine_id: Optional[str] = None
    date: Optional[dt.datetime] = None  # defaults to now
    duration: Optional[int] = Field(default=None, ge=0)
    exercises: List[LoggedExercise] = []
    notes: Optional[str] = None
    rating: Optional[int] = Field(default=None, ge=1, le=5)
    fatigue_level: Optional[int] = Field(default=None, ge=1, le=10)
    rpe: Optional[float] = Field(default=None, ge=0, le=10)
    rir: Optional[float] = Field(default=None, ge=0, le=5)

class OneRepMaxRequest(BaseModel):
    weight: float
    reps: int
    formula: str = "brzycki"

# --- FATIGUE ---
class WellnessLogCreate(BaseModel):
    date: Optional[dt.date] = None
    sleep_quality: Optional[float] = Field(default=None, ge=0, le=100)
    stress_level: Optional[float] = Field(default=None, ge=0, le=100)
    soreness: Optional[float] = Field(default=None, ge=0, le=100)
    readiness: Optional[float] = Field(default=None, ge=0, le=100)
    notes: Optional[str] = None

class DeloadRecord(BaseModel):
    date: Optional[dt.date] = None
    deload_type: Optional[str] = None
    duration: Optional[int] = None
    notes: Optional[str] = None

# --- NUTRITION ---
class NutritionEntryCreate(BaseModel):
    date: dt.date
    meal_type: MealType
    food_name: str
    food_id: Optional[str] = None
    quantity: float = 100
    unit: str = "g"
    calories: float = Field(default=0, ge=0)
    protein: float = Field(default=0, ge=0)
    carbs: float = Field(default=0, ge=0)
    fat: float = Field(default=0, ge=0)

class NutritionEntryUpdate(BaseModel):
    date: Optional[dt.date] = None
    meal_type: Optional[MealType] = None
    food_name: Optional[str] = Field(default=None, min_length=1)
    quantity: Optional[float] = Field(default=None, ge=0)
    unit: Optional[str] = None
    calories: Optional[float] = Field(default=None, ge=0)
    protein: Optional[float] = Field(default=None, ge=0)
    carbs: Optional[float] = Field(default=None, ge=0)
    fat: Optional[float] = Field(default=None, ge=0)

class NutritionGoalCreate(BaseModel):
    calories: float = Field(gt=0)
    protein: Optional[float] = None
    carbs: Optional[float] = None
    fat: Optional[float] = None
    water_ml: Optional[int] = None

class WaterEntryCreate(BaseModel):
    date: dt.date
    amount_ml: int = Field(gt=0)

# --- MEAL PLANS ---
class MealPlanPreferences(BaseModel):
    diet_type: Literal["omnivore", "vegetarian", "vegan"] = "omnivore"
    allergies: List[str] = []
    budget: str = "medium"
    cooking_time: str = "moderate"
    servings: int = Field(default=2, ge=1)

class ShoppingItemUpdate(BaseModel):
    checked: bool

# --- SLEEP ---
class SleepFactors(BaseModel):
    alcohol: bool = False
    caffeine: bool = False
    screens: bool = False
    stress: bool = False
    exercise: bool = False
    late_meal: bool = False
    noise: bool = False
    temperature: bool = False

class SleepEntryCreate(BaseModel):
    id: Optional[str] = None
    date: dt.date
    start_time: str
    end_time: str
    duration: int = Field(ge=0)
    quality: int = Field(ge=1, le=10)
    deep_sleep: Optional[int] = None
    rem_sleep: Optional[int] = None
    light_sleep: Optional[int] = None
    awake_time: Optional[int] = None
    hrv: Optional[float] = None
    resting_heart_rate: Optional[float] = None
    body_temperature: Optional[float] = None
    factors: Optional[SleepFactors] = None
    notes: Optional[str] = None
    device_source: str = "manual"

class SleepGoalUpdate(BaseModel):
    target_duration: int = Field(default=480, gt=0)
    target_bedtime: str = "23:00"
    target_wake_time: str = "07:00"
    target_deep_sleep_percentage: int = 20
    target_rem_sleep_percentage: int = 25
    target_hrv: Optional[float] = None

# --- WELLNESS ---
class AssessmentCreate(BaseModel):
    assessment_data: Dict[str, Union[str, int, float, bool, List[str], None]]

# --- WEARABLES ---
class WearableConnect(BaseModel):
    device_type: DeviceType
    device_name: Optional[str] = None
    device_id: Optional[str] = None
    auth_token: str
    refresh_token: Optional[str] = None
    expires_in: Optional[int] = None  # seconds
    battery_level: Optional[int] = Field(default=None, ge=0, le=100)

class HeartRateData(BaseModel):
    average: Optional[int] = None
    resting: Optional[int] = None
    max: Optional[int] = None
    variability: Optional[float] = None
    zones: Optional[Dict[str, float]] = None

class SleepSummary(BaseModel):
    duration: Optional[float] = None  # hours
    score: Optional[int] = None
    stages: Optional[Dict[str, float]] = None
    breathing_rate: Optional[float] = None
    snoring: Optional[float] = None

class ActivityRecord(BaseModel):
    date: Optional[dt.date] = None
    device_id: Optional[str] = None
    steps: int = Field(default=0, ge=0)
    calories_burned: int = Field(default=0, ge=0)
    active_minutes: int = Field(default=0, ge=0)
    heart_rate: Optional[HeartRateData] = None
    sleep: Optional[SleepSummary] = None
    stress_level: Optional[int] = None
    blood_oxygen: Optional[int] = None
    hydration: Optional[int] = None

# --- INSIGHTS ---
class FormAnalysisRequest(BaseModel):
    exercise_id: str
    exercise_name: str

# --- ADMIN ---
class AdminUserUpdate(BaseModel):
    role: Optional[Literal["user", "admin"]] = None
    is_active: Optional[bool] = None
    full_name: Optional[str] = None
