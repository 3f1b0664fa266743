from sqlalchemy import Column, Integer, String, Boolean, Float, ForeignKey, Text
from database import Base
from datetime import datetime


def _now():
    return datetime.utcnow().isoformat()

# --- CORE MODELS ---

class UserORM(Base):
    __tablename__ = "users"

    id = Column(String, primary_key=True, index=True)
    username = Column(String, unique=True, index=True)
    email = Column(String, unique=True, index=True, nullable=True)
    full_name = Column(String, nullable=True)
    hashed_password = Column(String)
    role = Column(String, index=True, default="user")  # user, admin
    is_active = Column(Boolean, default=True, index=True)
    created_at = Column(String, default=_now)

# --- EXERCISE LIBRARY ---

class ExerciseORM(Base):
    __tablename__ = "exercises"

    id = Column(String, primary_key=True, index=True)
    name = Column(String, index=True)
    description = Column(Text, nullable=True)
    category = Column(String, nullable=True)  # strength, cardio, mobility...
    muscle_groups_json = Column(Text, nullable=True)  # JSON array
    secondary_muscle_groups_json = Column(Text, nullable=True)  # JSON array
    difficulty = Column(String, default="intermediate")  # beginner, intermediate, advanced
    equipment_json = Column(Text, nullable=True)  # JSON array
    is_compound = Column(Boolean, default=False)
    image_url = Column(String, nullable=True)
    video_url = Column(String, nullable=True)
    instructions = Column(Text, nullable=True)
    tips = Column(Text, nullable=True)
    created_at = Column(String, default=_now)
    updated_at = Column(String, default=_now)

# --- ROUTINES & LOGS ---

class WorkoutRoutineORM(Base):
    __tablename__ = "workout_routines"

    id = Column(String, primary_key=True, index=True)
    # NULL for built-in templates
    user_id = Column(String, ForeignKey("users.id"), index=True, nullable=True)
    name = Column(String)
    description = Column(Text, nullable=True)
    level = Column(String, default="beginner")
    goal = Column(String, default="general")
    frequency = Column(String, default="3-4 days per week")
    # Days are stored inline (list of dicts), same as the hosted table did
    days_json = Column(Text, default="[]")
    is_active = Column(Boolean, default=True)
    is_template = Column(Boolean, default=False, index=True)
    created_at = Column(String, default=_now)
    updated_at = Column(String, default=_now)

class WorkoutLogORM(Base):
    __tablename__ = "workout_logs"

    id = Column(String, primary_key=True, index=True)
    user_id = Column(String, ForeignKey("users.id"), index=True)
    routine_id = Column(String, nullable=True)
    date = Column(String, index=True)  # ISO datetime
    duration = Column(Integer, nullable=True)  # minutes
    exercises_json = Column(Text)  # [{name, muscle_groups, sets: [{reps, weight, rpe, rir}]}]
    notes = Column(Text, nullable=True)
    rating = Column(Integer, nullable=True)  # 1-5
    fatigue_level = Column(Integer, nullable=True)  # 1-10
    rpe = Column(Float, nullable=True)  # session RPE 0-10
    rir = Column(Float, nullable=True)  # session RIR 0-5
    created_at = Column(String, default=_now)

class DeloadHistoryORM(Base):
    __tablename__ = "deload_history"

    id = Column(String, primary_key=True, index=True)
    user_id = Column(String, ForeignKey("users.id"), index=True)
    date = Column(String, index=True)  # YYYY-MM-DD
    deload_type = Column(String, nullable=True)
    duration = Column(Integer, nullable=True)  # days
    notes = Column(Text, nullable=True)
    created_at = Column(String, default=_now)

class WellnessLogORM(Base):
    __tablename__ = "wellness_logs"

    id = Column(String, primary_key=True, index=True)
    user_id = Column(String, ForeignKey("users.id"), index=True)
    date = Column(String, index=True)  # YYYY-MM-DD
    sleep_quality = Column(Float, nullable=True)  # 0-100
    stress_level = Column(Float, nullable=True)  # 0-100
    soreness = Column(Float, nullable=True)  # 0-100
    readiness = Column(Float, nullable=True)  # 0-100
    notes = Column(Text, nullable=True)
    created_at = Column(String, default=_now)

# --- NUTRITION ---

class NutritionEntryORM(Base):
    __tablename__ = "nutrition"

    id = Column(String, primary_key=True, index=True)
    user_id = Column(String, ForeignKey("users.id"), index=True)
    date = Column(String, index=True)  # YYYY-MM-DD
    meal_type = Column(String, index=True)  # breakfast, lunch, dinner, snack
    food_name = Column(String)
    food_id = Column(String, nullable=True)  # catalog id when picked from the food database
    quantity = Column(Float, default=100)
    unit = Column(String, default="g")
    calories = Column(Float, default=0)
    protein = Column(Float, default=0)
    carbs = Column(Float, default=0)
    fat = Column(Float, default=0)
    created_at = Column(String, default=_now)

class NutritionGoalORM(Base):
    __tablename__ = "nutrition_goals"

    id = Column(String, primary_key=True, index=True)
    user_id = Column(String, ForeignKey("users.id"), index=True)
    calories = Column(Float)
    protein = Column(Float, nullable=True)
    carbs = Column(Float, nullable=True)
    fat = Column(Float, nullable=True)
    water_ml = Column(Integer, nullable=True)
    is_active = Column(Boolean, default=True, index=True)
    created_at = Column(String, default=_now)
    updated_at = Column(String, default=_now)

class WaterLogORM(Base):
    __tablename__ = "water_log"

    id = Column(String, primary_key=True, index=True)
    user_id = Column(String, ForeignKey("users.id"), index=True)
    date = Column(String, index=True)  # YYYY-MM-DD
    amount_ml = Column(Integer)
    created_at = Column(String, default=_now)

class MealPlanORM(Base):
    __tablename__ = "meal_plans"

    id = Column(String, primary_key=True, index=True)
    user_id = Column(String, ForeignKey("users.id"), index=True)
    name = Column(String)
    week_start = Column(String, index=True)  # YYYY-MM-DD (Monday)
    meals_json = Column(Text)  # {day: {breakfast, lunch, dinner, snack}}
    preferences_json = Column(Text)
    shopping_list_json = Column(Text, default="[]")
    created_at = Column(String, default=_now)

# --- SLEEP ---

class SleepEntryORM(Base):
    __tablename__ = "sleep_entries"

    id = Column(String, primary_key=True, index=True)
    user_id = Column(String, ForeignKey("users.id"), index=True)
    date = Column(String, index=True)  # YYYY-MM-DD
    start_time = Column(String)  # HH:MM
    end_time = Column(String)  # HH:MM
    duration = Column(Integer)  # minutes
    quality = Column(Integer)  # 1-10
    deep_sleep = Column(Integer, nullable=True)
    rem_sleep = Column(Integer, nullable=True)
    light_sleep = Column(Integer, nullable=True)
    awake_time = Column(Integer, nullable=True)
    hrv = Column(Float, nullable=True)
    resting_heart_rate = Column(Float, nullable=True)
    body_temperature = Column(Float, nullable=True)
    factors_json = Column(Text, nullable=True)
    notes = Column(Text, nullable=True)
    device_source = Column(String, default="manual")
    created_at = Column(String, default=_now)
    updated_at = Column(String, default=_now)

class SleepGoalORM(Base):
    __tablename__ = "sleep_goals"

    id = Column(String, primary_key=True, index=True)
    user_id = Column(String, ForeignKey("users.id"), index=True)
    target_duration = Column(Integer, default=480)  # minutes
    target_bedtime = Column(String, default="23:00")
    target_wake_time = Column(String, default="07:00")
    target_deep_sleep_percentage = Column(Integer, default=20)
    target_rem_sleep_percentage = Column(Integer, default=25)
    target_hrv = Column(Float, nullable=True)
    is_active = Column(Boolean, default=True, index=True)
    created_at = Column(String, default=_now)
    updated_at = Column(String, default=_now)

# --- WELLNESS ---

class RecoverySessionORM(Base):
    __tablename__ = "recovery_sessions"

    id = Column(String, primary_key=True, index=True)
    user_id = Column(String, ForeignKey("users.id"), index=True)
    session_id = Column(String)  # catalog id
    type = Column(String)
    duration = Column(Integer)  # minutes
    completed = Column(Boolean, default=True)
    created_at = Column(String, default=_now)

class UserAssessmentORM(Base):
    __tablename__ = "user_assessments"

    id = Column(String, primary_key=True, index=True)
    user_id = Column(String, ForeignKey("users.id"), index=True)
    assessment_json = Column(Text)
    created_at = Column(String, default=_now)

# --- WEARABLES ---

class ConnectedWearableORM(Base):
    __tablename__ = "connected_wearables"

    id = Column(String, primary_key=True, index=True)
    user_id = Column(String, ForeignKey("users.id"), index=True)
    device_id = Column(String, index=True)
    device_name = Column(String)
    device_type = Column(String)  # oura, whoop, garmin, apple_watch, fitbit, polar
    status = Column(String, default="active")  # active, disconnected
    auth_token = Column(String, nullable=True)
    refresh_token = Column(String, nullable=True)
    token_expires_at = Column(String, nullable=True)
    last_sync = Column(String, nullable=True)
    battery_level = Column(Integer, nullable=True)
    settings_json = Column(Text, nullable=True)
    created_at = Column(String, default=_now)
    updated_at = Column(String, default=_now)

class WearableDataORM(Base):
    __tablename__ = "wearable_data"

    id = Column(String, primary_key=True, index=True)
    user_id = Column(String, ForeignKey("users.id"), index=True)
    date = Column(String, index=True)  # YYYY-MM-DD
    device_id = Column(String, nullable=True)
    steps = Column(Integer, default=0)
    calories_burned = Column(Integer, default=0)
    active_minutes = Column(Integer, default=0)
    heart_rate_json = Column(Text, nullable=True)  # {average, resting, max, variability, zones}
    sleep_json = Column(Text, nullable=True)  # {duration, score, stages, breathing_rate, snoring}
    stress_level = Column(Integer, nullable=True)
    blood_oxygen = Column(Integer, nullable=True)
    hydration = Column(Integer, nullable=True)
    created_at = Column(String, default=_now)
