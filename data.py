
# --- STATIC CATALOGS ---

def _food(id, name, category, subcategory, calories, protein, carbs, fat,
          fiber=None, sugar=None, sodium=None, region=None, brand=None,
          supermarkets=("Mercadona", "Carrefour"), price=None,
          vegan=False, vegetarian=False, gluten_free=True, organic=False):
    return {
        "id": id,
        "name": name,
        "brand": brand,
        "category": category,
        "subcategory": subcategory,
        "supermarkets": list(supermarkets),
        "region": region,
        "nutrition_per_100g": {
            "calories": calories,
            "protein": protein,
            "carbs": carbs,
            "fat": fat,
            "fiber": fiber,
            "sugar": sugar,
            "sodium": sodium,
        },
        "price": price,
        "is_vegan": vegan,
        "is_vegetarian": vegetarian or vegan,
        "is_gluten_free": gluten_free,
        "is_organic": organic,
    }


SPANISH_FOODS = [
    # FRUTAS
    _food("es-fruit-001", "Naranja Valencia", "Frutas", "Cítricos", 47, 0.9, 11.8, 0.1, 2.4, 9.4, 0,
          region="Valencia", supermarkets=("Mercadona", "Carrefour", "El Corte Inglés"),
          price={"amount": 1.20, "unit": "kg", "supermarket": "Mercadona"}, vegan=True),
    _food("es-fruit-002", "Manzana Golden", "Frutas", "Frutas de pepita", 52, 0.3, 13.8, 0.2, 2.4, 10.4, 1,
          supermarkets=("Mercadona", "Carrefour", "Lidl", "Aldi"),
          price={"amount": 1.50, "unit": "kg", "supermarket": "Mercadona"}, vegan=True),
    _food("es-fruit-003", "Plátano de Canarias", "Frutas", "Frutas tropicales", 89, 1.1, 22.8, 0.3, 2.6, 12.2, 1,
          region="Canarias", price={"amount": 2.20, "unit": "kg", "supermarket": "Mercadona"}, vegan=True),
    _food("es-fruit-004", "Fresa de Huelva", "Frutas", "Frutos rojos", 32, 0.7, 7.7, 0.3, 2.0, 4.9, 1,
          region="Andalucía", vegan=True),
    _food("es-fruit-005", "Uva Tempranillo", "Frutas", "Uvas", 69, 0.7, 17.2, 0.2, 0.9, 15.5, 2,
          region="La Rioja", vegan=True),
    _food("es-fruit-006", "Melocotón de Calanda", "Frutas", "Frutas de hueso", 39, 0.9, 9.5, 0.3, 1.5, 8.4, 0,
          region="Aragón", vegan=True),
    _food("es-fruit-007", "Cereza del Jerte", "Frutas", "Frutas de hueso", 63, 1.1, 16.0, 0.2, 2.1, 12.8, 0,
          region="Extremadura", vegan=True),
    _food("es-fruit-008", "Limón de Murcia", "Frutas", "Cítricos", 29, 1.1, 9.3, 0.3, 2.8, 2.5, 2,
          region="Murcia", vegan=True),
    # VERDURAS
    _food("es-veg-001", "Tomate Pera", "Verduras", "Solanáceas", 18, 0.9, 3.9, 0.2, 1.2, 2.6, 5,
          supermarkets=("Mercadona", "Carrefour", "Lidl"), vegan=True),
    _food("es-veg-002", "Pimiento Rojo", "Verduras", "Solanáceas", 31, 1.0, 7.3, 0.3, 2.1, 4.2, 4, vegan=True),
    _food("es-veg-003", "Cebolla Blanca", "Verduras", "Bulbos", 40, 1.1, 9.3, 0.1, 1.7, 4.2, 4, vegan=True),
    _food("es-veg-004", "Lechuga Iceberg", "Verduras", "Hojas verdes", 14, 0.9, 3.0, 0.1, 1.2, 2.0, 10, vegan=True),
    _food("es-veg-005", "Espinacas Baby", "Verduras", "Hojas verdes", 23, 2.9, 3.6, 0.4, 2.2, 0.4, 79, vegan=True),
    _food("es-veg-006", "Calabacín", "Verduras", "Calabazas", 17, 1.2, 3.1, 0.3, 1.0, 2.5, 8, vegan=True),
    _food("es-veg-007", "Berenjena", "Verduras", "Solanáceas", 25, 1.0, 6.0, 0.2, 3.0, 3.5, 2, vegan=True),
    _food("es-veg-008", "Brócoli", "Verduras", "Crucíferas", 34, 2.8, 7.0, 0.4, 2.6, 1.7, 33, vegan=True),
    # CARNES
    _food("es-meat-001", "Jamón Ibérico de Bellota", "Carnes", "Embutidos", 375, 43.0, 0.0, 22.0, sodium=1800,
          region="Extremadura", supermarkets=("El Corte Inglés", "Carrefour")),
    _food("es-meat-002", "Chorizo Ibérico", "Carnes", "Embutidos", 455, 25.0, 2.0, 38.0, sodium=1500),
    _food("es-meat-003", "Lomo Ibérico", "Carnes", "Cerdo", 208, 20.7, 0.0, 13.6, region="Extremadura"),
    _food("es-meat-004", "Pollo de Corral", "Carnes", "Aves", 165, 31.0, 0.0, 3.6, sodium=74),
    _food("es-meat-005", "Ternera de Ávila", "Carnes", "Ternera", 250, 26.0, 0.0, 15.0, region="Castilla y León"),
    _food("es-meat-006", "Pavo en Lonchas", "Carnes", "Aves", 104, 18.0, 2.0, 2.5, sodium=900, brand="Campofrío"),
    # PESCADOS
    _food("es-fish-001", "Merluza del Norte", "Pescados", "Pescado blanco", 92, 17.8, 0.0, 2.6, region="País Vasco"),
    _food("es-fish-002", "Atún Rojo de Almadraba", "Pescados", "Pescado azul", 144, 23.3, 0.0, 4.9, region="Andalucía"),
    _food("es-fish-003", "Sardina Fresca", "Pescados", "Pescado azul", 208, 24.6, 0.0, 11.5, region="Galicia"),
    _food("es-fish-004", "Bacalao Desalado", "Pescados", "Pescado blanco", 82, 18.0, 0.0, 0.7, sodium=300),
    _food("es-fish-005", "Salmón Noruego", "Pescados", "Pescado azul", 208, 20.0, 0.0, 13.0,
          supermarkets=("Mercadona", "Lidl")),
    # LÁCTEOS
    _food("es-dairy-001", "Queso Manchego Curado", "Lácteos", "Quesos", 392, 32.0, 0.5, 29.0, sodium=670,
          region="Castilla-La Mancha", vegetarian=True),
    _food("es-dairy-002", "Yogur Natural Griego", "Lácteos", "Yogures", 97, 9.0, 4.0, 5.0, brand="Hacendado",
          vegetarian=True),
    _food("es-dairy-003", "Leche Semidesnatada", "Lácteos", "Leche", 46, 3.1, 4.7, 1.6, brand="Central Lechera Asturiana",
          region="Asturias", vegetarian=True),
    _food("es-dairy-004", "Queso Fresco de Burgos", "Lácteos", "Quesos", 174, 12.0, 3.0, 13.0,
          region="Castilla y León", vegetarian=True),
    # CEREALES
    _food("es-cereal-001", "Arroz Bomba", "Cereales", "Arroz", 354, 7.0, 77.0, 0.6, 1.3, region="Valencia", vegan=True),
    _food("es-cereal-002", "Copos de Avena", "Cereales", "Avena", 372, 13.5, 58.7, 7.0, 10.0, 1.0, 6,
          brand="Hacendado", vegan=True, gluten_free=False),
    _food("es-cereal-003", "Pan Integral de Centeno", "Cereales", "Pan", 259, 8.5, 48.0, 3.3, 6.0,
          vegan=True, gluten_free=False),
    # LEGUMBRES
    _food("es-legume-001", "Garbanzos de Fuentesaúco", "Legumbres", "Garbanzos", 364, 19.3, 61.0, 6.0, 17.4,
          region="Zamora", vegan=True),
    _food("es-legume-002", "Lentejas Pardinas", "Legumbres", "Lentejas", 336, 24.0, 54.0, 1.8, 11.0,
          region="Castilla y León", vegan=True),
    _food("es-legume-003", "Alubias de La Granja", "Legumbres", "Alubias", 333, 23.0, 60.0, 0.8, 15.0,
          region="Segovia", vegan=True),
    # FRUTOS SECOS
    _food("es-nut-001", "Almendra Marcona", "Frutos secos", "Almendras", 579, 21.2, 21.6, 49.9, 12.5, 4.4, 1,
          region="Alicante", vegan=True),
    _food("es-nut-002", "Nueces", "Frutos secos", "Nueces", 654, 15.2, 13.7, 65.2, 6.7, 2.6, 2, vegan=True),
    _food("es-nut-003", "Avellanas de Reus", "Frutos secos", "Avellanas", 628, 15.0, 16.7, 60.8, 9.7, 4.3, 0,
          region="Cataluña", vegan=True),
    # OTROS
    _food("es-oil-001", "Aceite de Oliva Virgen Extra", "Aceites", "Aceite de oliva", 884, 0.0, 0.0, 100.0,
          brand="Carbonell", region="Andalucía", vegan=True),
    _food("es-processed-001", "Gazpacho Andaluz", "Procesados", "Sopas frías", 35, 1.0, 4.5, 1.5, brand="Alvalle",
          region="Andalucía", vegan=True),
    _food("es-processed-002", "Paella Valenciana Congelada", "Procesados", "Platos preparados", 142, 8.5, 18.0, 4.2,
          brand="Hacendado", region="Valencia"),
]

# Which catalog categories each meal is drawn from
MEAL_CATEGORIES = {
    "breakfast": ["Lácteos", "Frutas", "Cereales"],
    "lunch": ["Carnes", "Pescados", "Verduras", "Legumbres"],
    "dinner": ["Pescados", "Verduras", "Carnes"],
    "snack": ["Frutas", "Lácteos", "Frutos secos"],
}

WEEK_DAYS = ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]


def _exercise(name, category, muscles, difficulty, equipment, compound=False, secondary=(), description=None,
              instructions=None, tips=None):
    return {
        "name": name,
        "category": category,
        "muscle_groups": list(muscles),
        "secondary_muscle_groups": list(secondary),
        "difficulty": difficulty,
        "equipment": list(equipment),
        "is_compound": compound,
        "description": description,
        "instructions": instructions,
        "tips": tips,
    }


EXERCISE_LIBRARY = [
    _exercise("Barbell Bench Press", "strength", ["chest"], "intermediate", ["barbell", "bench"], True,
              ["triceps", "shoulders"], "Horizontal press for chest strength.",
              "Lower the bar to mid-chest and press until arms are locked out.",
              "Keep shoulder blades retracted."),
    _exercise("Incline Dumbbell Press", "strength", ["chest"], "intermediate", ["dumbbell", "bench"], True,
              ["shoulders", "triceps"], "Upper-chest press on a 30-degree bench."),
    _exercise("Push-Up", "strength", ["chest"], "beginner", ["bodyweight"], True, ["triceps", "core"],
              "Bodyweight horizontal press."),
    _exercise("Back Squat", "strength", ["quadriceps", "glutes"], "intermediate", ["barbell", "rack"], True,
              ["hamstrings", "core"], "The main lower-body strength lift.",
              "Sit between your hips keeping the chest up, then drive through mid-foot.",
              "Brace before every rep."),
    _exercise("Goblet Squat", "strength", ["quadriceps", "glutes"], "beginner", ["dumbbell", "kettlebell"], True,
              ["core"], "Front-loaded squat that teaches depth."),
    _exercise("Conventional Deadlift", "strength", ["hamstrings", "back"], "advanced", ["barbell"], True,
              ["glutes", "forearms"], "Hip hinge lifting the bar from the floor."),
    _exercise("Romanian Deadlift", "strength", ["hamstrings"], "intermediate", ["barbell", "dumbbell"], True,
              ["glutes", "back"], "Hinge with soft knees, bar close to the legs."),
    _exercise("Pull-Up", "strength", ["back"], "intermediate", ["pull-up bar"], True, ["biceps"],
              "Vertical pull to chin over the bar."),
    _exercise("Lat Pulldown", "strength", ["back"], "beginner", ["cable machine"], True, ["biceps"],
              "Machine vertical pull."),
    _exercise("Barbell Row", "strength", ["back"], "intermediate", ["barbell"], True, ["biceps", "forearms"],
              "Bent-over horizontal pull."),
    _exercise("Overhead Press", "strength", ["shoulders"], "intermediate", ["barbell"], True, ["triceps", "core"],
              "Standing vertical press."),
    _exercise("Lateral Raise", "strength", ["shoulders"], "beginner", ["dumbbell"], False, [],
              "Isolation for the side delts."),
    _exercise("Biceps Curl", "strength", ["biceps"], "beginner", ["dumbbell"], False, ["forearms"]),
    _exercise("Triceps Rope Pushdown", "strength", ["triceps"], "beginner", ["cable machine"], False),
    _exercise("Leg Press", "strength", ["quadriceps"], "beginner", ["machine"], True, ["glutes"]),
    _exercise("Walking Lunge", "strength", ["quadriceps", "glutes"], "beginner", ["bodyweight", "dumbbell"], True,
              ["hamstrings"]),
    _exercise("Plank", "core", ["core"], "beginner", ["bodyweight"], False, ["shoulders"],
              "Isometric anti-extension hold."),
    _exercise("Hanging Leg Raise", "core", ["core"], "advanced", ["pull-up bar"], False, ["forearms"]),
    _exercise("Rowing Machine Intervals", "cardio", ["full body"], "intermediate", ["rowing machine"], True),
    _exercise("Hip Flexor Stretch", "mobility", ["hips"], "beginner", ["bodyweight"], False),
]


def _day(name, description, exercises):
    return {
        "name": name,
        "description": description,
        "exercises": [
            {"name": n, "sets": s, "reps": r, "rest": rest} for n, s, r, rest in exercises
        ],
    }


ROUTINE_TEMPLATES = [
    {
        "name": "Push / Pull / Legs",
        "description": "Classic six-day hypertrophy split run as three days twice a week.",
        "level": "intermediate",
        "goal": "hypertrophy",
        "frequency": "6 days per week",
        "days": [
            _day("Push", "Chest, shoulders and triceps", [
                ("Barbell Bench Press", 4, "6-8", 150),
                ("Incline Dumbbell Press", 3, "8-10", 120),
                ("Overhead Press", 3, "8-10", 120),
                ("Lateral Raise", 3, "12-15", 60),
                ("Triceps Rope Pushdown", 3, "10-12", 60),
            ]),
            _day("Pull", "Back and biceps", [
                ("Pull-Up", 4, "6-10", 150),
                ("Barbell Row", 3, "8-10", 120),
                ("Lat Pulldown", 3, "10-12", 90),
                ("Biceps Curl", 3, "10-12", 60),
            ]),
            _day("Legs", "Quads, hamstrings and glutes", [
                ("Back Squat", 4, "6-8", 180),
                ("Romanian Deadlift", 3, "8-10", 150),
                ("Leg Press", 3, "10-12", 120),
                ("Walking Lunge", 3, "12", 90),
            ]),
        ],
    },
    {
        "name": "Upper / Lower",
        "description": "Four-day strength split alternating upper and lower body.",
        "level": "intermediate",
        "goal": "strength",
        "frequency": "4 days per week",
        "days": [
            _day("Upper", "Horizontal and vertical push/pull", [
                ("Barbell Bench Press", 4, "5", 180),
                ("Barbell Row", 4, "6-8", 150),
                ("Overhead Press", 3, "6-8", 150),
                ("Pull-Up", 3, "8", 120),
            ]),
            _day("Lower", "Squat and hinge", [
                ("Back Squat", 4, "5", 180),
                ("Romanian Deadlift", 3, "8", 150),
                ("Walking Lunge", 3, "10", 90),
                ("Plank", 3, "45s", 60),
            ]),
        ],
    },
    {
        "name": "Full Body Beginner",
        "description": "Three full-body sessions per week for new lifters.",
        "level": "beginner",
        "goal": "general",
        "frequency": "3 days per week",
        "days": [
            _day("Full Body A", "Squat, push, pull", [
                ("Goblet Squat", 3, "10", 90),
                ("Push-Up", 3, "8-12", 90),
                ("Lat Pulldown", 3, "10-12", 90),
                ("Plank", 3, "30s", 60),
            ]),
            _day("Full Body B", "Hinge, press, row", [
                ("Romanian Deadlift", 3, "10", 90),
                ("Incline Dumbbell Press", 3, "10", 90),
                ("Barbell Row", 3, "10", 90),
                ("Walking Lunge", 2, "10", 60),
            ]),
        ],
    },
]

RECOVERY_SESSIONS = [
    {"id": "meditation-1", "title": "Stress reduction meditation",
     "description": "A guided meditation to lower stress and anxiety",
     "type": "meditation", "duration": 10, "level": "beginner"},
    {"id": "meditation-2", "title": "Meditation for better sleep",
     "description": "A relaxing meditation to prepare for sleep",
     "type": "meditation", "duration": 15, "level": "beginner"},
    {"id": "yoga-1", "title": "Morning yoga",
     "description": "Gentle yoga flow to wake the body up",
     "type": "yoga", "duration": 20, "level": "beginner"},
    {"id": "yoga-2", "title": "Yoga for muscle recovery",
     "description": "Poses that relieve muscle tension",
     "type": "yoga", "duration": 25, "level": "intermediate"},
    {"id": "stretching-1", "title": "Post-workout stretching",
     "description": "Stretching routine for after training",
     "type": "stretching", "duration": 15, "level": "beginner"},
    {"id": "breathing-1", "title": "4-7-8 breathing",
     "description": "Breathing technique to reduce anxiety",
     "type": "breathing", "duration": 5, "level": "beginner"},
]

GENERAL_SLEEP_RECOMMENDATIONS = [
    {"id": "general-1", "title": "Optimise your sleep environment",
     "description": "Keep the bedroom dark, cool and quiet. Consider an eye mask, earplugs or a white-noise machine.",
     "priority": "medium", "category": "environment"},
    {"id": "general-2", "title": "Hydrate smartly",
     "description": "Drink well during the day but cut fluids 1-2 hours before bed to avoid waking up at night.",
     "priority": "low", "category": "habits"},
    {"id": "general-3", "title": "Light dinner",
     "description": "Avoid heavy or spicy meals in the 3 hours before bed. A light dinner makes for more restful sleep.",
     "priority": "medium", "category": "habits"},
    {"id": "general-4", "title": "Relaxing evening ritual",
     "description": "A warm bath, soft music, meditation or reading help your body get ready for sleep.",
     "priority": "medium", "category": "routine"},
    {"id": "general-5", "title": "Morning daylight",
     "description": "Get natural light in the morning to anchor your circadian rhythm and a steady sleep-wake cycle.",
     "priority": "medium", "category": "routine"},
]

FORM_ISSUE_DESCRIPTIONS = {
    "posture": "Keep your back straight throughout the movement",
    "range_of_motion": "Increase the range of motion for a more effective rep",
    "tempo": "Control the speed of the movement, especially the eccentric phase",
    "alignment": "Keep your knees aligned with your feet",
}
