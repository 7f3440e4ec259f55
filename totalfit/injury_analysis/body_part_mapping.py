"""
Exercise, sport and position to body-part mapping.

The tables below decide which body parts a logged activity loads, and the
multiplier functions describe which of those parts take a disproportionate
share of the stress (a pitcher's throwing shoulder, a kicker's kicking leg).
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Optional

from totalfit.core.logging_config import get_logger

from .constants import DEFAULT_BODY_PARTS

logger = get_logger(__name__)

BODY_PARTS = (
    "head",
    "orbit",
    "neck",
    "chest",
    "abdomen",
    "right-shoulder",
    "left-shoulder",
    "right-arm",
    "left-arm",
    "right-hand",
    "left-hand",
    "right-leg",
    "left-leg",
    "right-foot",
    "left-foot",
)

EXERCISE_BODY_PART_MAP: Dict[str, List[str]] = {
    "Bench Press": ["chest", "right-shoulder", "left-shoulder", "right-arm", "left-arm"],
    "Incline Bench Press": ["chest", "right-shoulder", "left-shoulder", "right-arm", "left-arm"],
    "Decline Bench Press": ["chest", "right-shoulder", "left-shoulder", "right-arm", "left-arm"],
    "Dumbbell Bench Press": ["chest", "right-shoulder", "left-shoulder", "right-arm", "left-arm"],
    "Push-ups": ["chest", "right-shoulder", "left-shoulder", "right-arm", "left-arm", "abdomen"],
    "Dumbbell Flyes": ["chest", "right-shoulder", "left-shoulder"],
    "Cable Crossover": ["chest", "right-shoulder", "left-shoulder"],
    "Chest Dips": ["chest", "right-shoulder", "left-shoulder", "right-arm", "left-arm"],
    "Pec Deck Machine": ["chest", "right-shoulder", "left-shoulder"],
    "Overhead Press": ["right-shoulder", "left-shoulder", "right-arm", "left-arm", "neck", "abdomen"],
    "Military Press": ["right-shoulder", "left-shoulder", "right-arm", "left-arm", "abdomen"],
    "Dumbbell Shoulder Press": ["right-shoulder", "left-shoulder", "right-arm", "left-arm"],
    "Arnold Press": ["right-shoulder", "left-shoulder", "right-arm", "left-arm"],
    "Lateral Raises": ["right-shoulder", "left-shoulder", "right-arm", "left-arm"],
    "Front Raises": ["right-shoulder", "left-shoulder", "right-arm", "left-arm"],
    "Rear Delt Flyes": ["right-shoulder", "left-shoulder"],
    "Face Pulls": ["right-shoulder", "left-shoulder", "neck"],
    "Upright Rows": ["right-shoulder", "left-shoulder", "right-arm", "left-arm"],
    "Shrugs": ["neck", "right-shoulder", "left-shoulder"],
    "Pull-ups": ["right-shoulder", "left-shoulder", "right-arm", "left-arm", "abdomen"],
    "Chin-ups": ["right-shoulder", "left-shoulder", "right-arm", "left-arm", "abdomen"],
    "Deadlift": ["abdomen", "right-leg", "left-leg", "right-shoulder", "left-shoulder", "neck"],
    "Romanian Deadlift": ["right-leg", "left-leg", "abdomen", "right-shoulder", "left-shoulder"],
    "Barbell Rows": ["right-shoulder", "left-shoulder", "right-arm", "left-arm", "abdomen"],
    "Dumbbell Rows": ["right-shoulder", "left-shoulder", "right-arm", "left-arm", "abdomen"],
    "Lat Pulldowns": ["right-shoulder", "left-shoulder", "right-arm", "left-arm"],
    "Seated Cable Rows": ["right-shoulder", "left-shoulder", "right-arm", "left-arm", "abdomen"],
    "T-Bar Rows": ["right-shoulder", "left-shoulder", "right-arm", "left-arm", "abdomen"],
    "Single-Arm Dumbbell Rows": ["right-shoulder", "left-shoulder", "right-arm", "left-arm", "abdomen"],
    "Bicep Curls": ["right-arm", "left-arm"],
    "Barbell Curls": ["right-arm", "left-arm"],
    "Hammer Curls": ["right-arm", "left-arm"],
    "Preacher Curls": ["right-arm", "left-arm"],
    "Concentration Curls": ["right-arm", "left-arm"],
    "Cable Curls": ["right-arm", "left-arm"],
    "Tricep Dips": ["right-arm", "left-arm", "right-shoulder", "left-shoulder", "chest"],
    "Tricep Pushdowns": ["right-arm", "left-arm"],
    "Overhead Tricep Extension": ["right-arm", "left-arm", "right-shoulder", "left-shoulder"],
    "Skull Crushers": ["right-arm", "left-arm"],
    "Close-Grip Bench Press": ["right-arm", "left-arm", "chest", "right-shoulder", "left-shoulder"],
    "Wrist Curls": ["right-hand", "left-hand", "right-arm", "left-arm"],
    "Squats": ["right-leg", "left-leg", "abdomen", "right-foot", "left-foot"],
    "Front Squats": ["right-leg", "left-leg", "abdomen", "chest"],
    "Back Squats": ["right-leg", "left-leg", "abdomen", "right-shoulder", "left-shoulder"],
    "Bulgarian Split Squats": ["right-leg", "left-leg", "abdomen"],
    "Lunges": ["right-leg", "left-leg", "abdomen"],
    "Walking Lunges": ["right-leg", "left-leg", "abdomen"],
    "Reverse Lunges": ["right-leg", "left-leg", "abdomen"],
    "Leg Press": ["right-leg", "left-leg"],
    "Leg Extensions": ["right-leg", "left-leg"],
    "Leg Curls": ["right-leg", "left-leg"],
    "Hamstring Curls": ["right-leg", "left-leg"],
    "Calf Raises": ["right-leg", "left-leg", "right-foot", "left-foot"],
    "Standing Calf Raises": ["right-leg", "left-leg", "right-foot", "left-foot"],
    "Seated Calf Raises": ["right-leg", "left-leg", "right-foot", "left-foot"],
    "Step-ups": ["right-leg", "left-leg", "right-foot", "left-foot", "abdomen"],
    "Box Jumps": ["right-leg", "left-leg", "right-foot", "left-foot", "abdomen"],
    "Jump Squats": ["right-leg", "left-leg", "right-foot", "left-foot", "abdomen"],
    "Hip Thrusts": ["abdomen", "right-leg", "left-leg"],
    "Glute Bridges": ["abdomen", "right-leg", "left-leg"],
    "Plank": ["abdomen", "right-shoulder", "left-shoulder"],
    "Side Plank": ["abdomen", "right-shoulder", "left-shoulder"],
    "Crunches": ["abdomen", "neck"],
    "Sit-ups": ["abdomen", "neck", "right-leg", "left-leg"],
    "Russian Twists": ["abdomen"],
    "Bicycle Crunches": ["abdomen", "right-leg", "left-leg"],
    "Hanging Leg Raises": ["abdomen", "right-arm", "left-arm", "right-shoulder", "left-shoulder"],
    "Ab Wheel Rollouts": ["abdomen", "right-shoulder", "left-shoulder", "right-arm", "left-arm"],
    "Mountain Climbers": ["abdomen", "right-leg", "left-leg", "right-shoulder", "left-shoulder"],
    "V-ups": ["abdomen", "right-leg", "left-leg"],
    "Leg Raises": ["abdomen", "right-leg", "left-leg"],
    "Cable Crunches": ["abdomen"],
    "Woodchoppers": ["abdomen", "right-shoulder", "left-shoulder"],
    "Clean and Jerk": [
        "right-leg",
        "left-leg",
        "right-shoulder",
        "left-shoulder",
        "right-arm",
        "left-arm",
        "abdomen",
        "neck",
    ],
    "Snatch": [
        "right-leg",
        "left-leg",
        "right-shoulder",
        "left-shoulder",
        "right-arm",
        "left-arm",
        "abdomen",
        "neck",
    ],
    "Power Clean": ["right-leg", "left-leg", "right-shoulder", "left-shoulder", "right-arm", "left-arm", "abdomen"],
    "Hang Clean": ["right-leg", "left-leg", "right-shoulder", "left-shoulder", "right-arm", "left-arm", "abdomen"],
    "Running": ["right-leg", "left-leg", "right-foot", "left-foot", "abdomen"],
    "Sprinting": ["right-leg", "left-leg", "right-foot", "left-foot", "abdomen"],
    "Jogging": ["right-leg", "left-leg", "right-foot", "left-foot"],
    "Treadmill": ["right-leg", "left-leg", "right-foot", "left-foot"],
    "Cycling": ["right-leg", "left-leg", "right-foot", "left-foot"],
    "Stationary Bike": ["right-leg", "left-leg"],
    "Elliptical": ["right-leg", "left-leg", "right-arm", "left-arm"],
    "Rowing": ["right-arm", "left-arm", "right-leg", "left-leg", "abdomen", "right-shoulder", "left-shoulder"],
    "Jump Rope": [
        "right-leg",
        "left-leg",
        "right-foot",
        "left-foot",
        "right-arm",
        "left-arm",
        "right-shoulder",
        "left-shoulder",
    ],
    "Stair Climber": ["right-leg", "left-leg", "right-foot", "left-foot", "abdomen"],
    "Battle Ropes": ["right-arm", "left-arm", "right-shoulder", "left-shoulder", "abdomen", "chest"],
    "Burpees": [
        "right-leg",
        "left-leg",
        "right-arm",
        "left-arm",
        "chest",
        "abdomen",
        "right-shoulder",
        "left-shoulder",
    ],
    "Wall Balls": ["right-leg", "left-leg", "right-shoulder", "left-shoulder", "right-arm", "left-arm", "abdomen"],
    "Kettlebell Swings": [
        "right-leg",
        "left-leg",
        "right-shoulder",
        "left-shoulder",
        "abdomen",
        "right-hand",
        "left-hand",
    ],
    "Turkish Get-ups": [
        "abdomen",
        "right-shoulder",
        "left-shoulder",
        "right-leg",
        "left-leg",
        "right-arm",
        "left-arm",
    ],
    "Farmers Walk": [
        "right-hand",
        "left-hand",
        "right-arm",
        "left-arm",
        "right-shoulder",
        "left-shoulder",
        "abdomen",
        "right-leg",
        "left-leg",
    ],
    "Sled Push": ["right-leg", "left-leg", "right-shoulder", "left-shoulder", "chest", "abdomen"],
    "Sled Pull": ["right-leg", "left-leg", "right-arm", "left-arm", "right-shoulder", "left-shoulder", "abdomen"],
    "Box Step-ups": ["right-leg", "left-leg", "right-foot", "left-foot", "abdomen"],
    "Medicine Ball Slams": ["right-arm", "left-arm", "right-shoulder", "left-shoulder", "abdomen", "chest"],
}

SPORT_BODY_PART_MAP: Dict[str, List[str]] = {
    "Basketball": [
        "right-leg",
        "left-leg",
        "right-foot",
        "left-foot",
        "right-shoulder",
        "left-shoulder",
        "right-arm",
        "left-arm",
        "right-hand",
        "left-hand",
        "abdomen",
    ],
    "Soccer": ["right-leg", "left-leg", "right-foot", "left-foot", "abdomen", "chest", "head"],
    "Football": [
        "head",
        "neck",
        "right-shoulder",
        "left-shoulder",
        "right-leg",
        "left-leg",
        "chest",
        "abdomen",
        "right-arm",
        "left-arm",
    ],
    "American Football": [
        "head",
        "neck",
        "right-shoulder",
        "left-shoulder",
        "right-leg",
        "left-leg",
        "chest",
        "abdomen",
        "right-arm",
        "left-arm",
    ],
    "Rugby": [
        "head",
        "neck",
        "right-shoulder",
        "left-shoulder",
        "chest",
        "abdomen",
        "right-leg",
        "left-leg",
        "right-arm",
        "left-arm",
    ],
    "Hockey": [
        "right-leg",
        "left-leg",
        "right-shoulder",
        "left-shoulder",
        "right-arm",
        "left-arm",
        "chest",
        "abdomen",
    ],
    "Ice Hockey": [
        "right-leg",
        "left-leg",
        "right-shoulder",
        "left-shoulder",
        "right-arm",
        "left-arm",
        "chest",
        "abdomen",
        "head",
    ],
    "Field Hockey": [
        "right-leg",
        "left-leg",
        "right-shoulder",
        "left-shoulder",
        "right-arm",
        "left-arm",
        "abdomen",
    ],
    "Volleyball": [
        "right-shoulder",
        "left-shoulder",
        "right-arm",
        "left-arm",
        "right-hand",
        "left-hand",
        "right-leg",
        "left-leg",
        "right-foot",
        "left-foot",
        "abdomen",
    ],
    "Baseball": [
        "right-shoulder",
        "left-shoulder",
        "right-arm",
        "left-arm",
        "right-leg",
        "left-leg",
        "right-hand",
        "left-hand",
        "abdomen",
    ],
    "Softball": [
        "right-shoulder",
        "left-shoulder",
        "right-arm",
        "left-arm",
        "right-leg",
        "left-leg",
        "right-hand",
        "left-hand",
    ],
    "Cricket": [
        "right-shoulder",
        "left-shoulder",
        "right-arm",
        "left-arm",
        "right-leg",
        "left-leg",
        "right-hand",
        "left-hand",
        "abdomen",
    ],
    "Tennis": [
        "right-shoulder",
        "left-shoulder",
        "right-arm",
        "left-arm",
        "right-hand",
        "left-hand",
        "right-leg",
        "left-leg",
        "right-foot",
        "left-foot",
        "abdomen",
    ],
    "Badminton": [
        "right-shoulder",
        "left-shoulder",
        "right-arm",
        "left-arm",
        "right-hand",
        "left-hand",
        "right-leg",
        "left-leg",
    ],
    "Squash": ["right-shoulder", "left-shoulder", "right-arm", "left-arm", "right-leg", "left-leg", "abdomen"],
    "Racquetball": ["right-shoulder", "left-shoulder", "right-arm", "left-arm", "right-leg", "left-leg"],
    "Table Tennis": [
        "right-shoulder",
        "left-shoulder",
        "right-arm",
        "left-arm",
        "right-hand",
        "left-hand",
        "right-leg",
        "left-leg",
    ],
    "Track and Field": ["right-leg", "left-leg", "right-foot", "left-foot", "abdomen", "chest"],
    "Marathon": ["right-leg", "left-leg", "right-foot", "left-foot", "abdomen"],
    "Swimming": [
        "right-shoulder",
        "left-shoulder",
        "right-arm",
        "left-arm",
        "right-leg",
        "left-leg",
        "chest",
        "abdomen",
        "neck",
    ],
    "Diving": [
        "right-shoulder",
        "left-shoulder",
        "right-arm",
        "left-arm",
        "right-leg",
        "left-leg",
        "abdomen",
        "neck",
    ],
    "Cycling": [
        "right-leg",
        "left-leg",
        "right-foot",
        "left-foot",
        "abdomen",
        "neck",
        "right-shoulder",
        "left-shoulder",
    ],
    "Mountain Biking": [
        "right-leg",
        "left-leg",
        "right-arm",
        "left-arm",
        "right-shoulder",
        "left-shoulder",
        "abdomen",
    ],
    "Triathlon": [
        "right-leg",
        "left-leg",
        "right-arm",
        "left-arm",
        "right-shoulder",
        "left-shoulder",
        "chest",
        "abdomen",
    ],
    "Rowing": [
        "right-arm",
        "left-arm",
        "right-leg",
        "left-leg",
        "abdomen",
        "right-shoulder",
        "left-shoulder",
        "chest",
    ],
    "CrossFit": [
        "right-leg",
        "left-leg",
        "right-arm",
        "left-arm",
        "right-shoulder",
        "left-shoulder",
        "chest",
        "abdomen",
    ],
    "Boxing": [
        "right-hand",
        "left-hand",
        "right-arm",
        "left-arm",
        "right-shoulder",
        "left-shoulder",
        "right-leg",
        "left-leg",
        "abdomen",
        "neck",
        "head",
    ],
    "MMA": [
        "right-hand",
        "left-hand",
        "right-arm",
        "left-arm",
        "right-leg",
        "left-leg",
        "right-foot",
        "left-foot",
        "head",
        "neck",
        "chest",
        "abdomen",
    ],
    "Kickboxing": [
        "right-hand",
        "left-hand",
        "right-arm",
        "left-arm",
        "right-leg",
        "left-leg",
        "right-foot",
        "left-foot",
        "abdomen",
    ],
    "Muay Thai": [
        "right-hand",
        "left-hand",
        "right-arm",
        "left-arm",
        "right-leg",
        "left-leg",
        "right-foot",
        "left-foot",
        "right-shoulder",
        "left-shoulder",
    ],
    "Karate": [
        "right-hand",
        "left-hand",
        "right-arm",
        "left-arm",
        "right-leg",
        "left-leg",
        "right-foot",
        "left-foot",
    ],
    "Taekwondo": [
        "right-leg",
        "left-leg",
        "right-foot",
        "left-foot",
        "right-hand",
        "left-hand",
        "right-arm",
        "left-arm",
    ],
    "Judo": [
        "right-arm",
        "left-arm",
        "right-shoulder",
        "left-shoulder",
        "right-leg",
        "left-leg",
        "neck",
        "abdomen",
    ],
    "Brazilian Jiu-Jitsu": [
        "right-arm",
        "left-arm",
        "right-leg",
        "left-leg",
        "neck",
        "abdomen",
        "right-shoulder",
        "left-shoulder",
    ],
    "Wrestling": [
        "head",
        "neck",
        "right-arm",
        "left-arm",
        "right-leg",
        "left-leg",
        "right-shoulder",
        "left-shoulder",
        "abdomen",
    ],
    "Skiing": ["right-leg", "left-leg", "right-foot", "left-foot", "abdomen", "right-arm", "left-arm"],
    "Snowboarding": [
        "right-leg",
        "left-leg",
        "right-foot",
        "left-foot",
        "abdomen",
        "right-arm",
        "left-arm",
        "right-shoulder",
        "left-shoulder",
    ],
    "Ice Skating": ["right-leg", "left-leg", "right-foot", "left-foot", "abdomen"],
    "Figure Skating": ["right-leg", "left-leg", "right-foot", "left-foot", "abdomen", "right-arm", "left-arm"],
    "Golf": ["right-shoulder", "left-shoulder", "right-arm", "left-arm", "abdomen", "right-leg", "left-leg"],
    "Rock Climbing": [
        "right-arm",
        "left-arm",
        "right-hand",
        "left-hand",
        "right-leg",
        "left-leg",
        "right-foot",
        "left-foot",
        "right-shoulder",
        "left-shoulder",
        "abdomen",
    ],
    "Gymnastics": [
        "right-arm",
        "left-arm",
        "right-leg",
        "left-leg",
        "right-shoulder",
        "left-shoulder",
        "abdomen",
        "right-hand",
        "left-hand",
    ],
    "Lacrosse": [
        "right-arm",
        "left-arm",
        "right-shoulder",
        "left-shoulder",
        "right-leg",
        "left-leg",
        "abdomen",
        "chest",
    ],
    "Surfing": [
        "right-arm",
        "left-arm",
        "right-shoulder",
        "left-shoulder",
        "abdomen",
        "right-leg",
        "left-leg",
        "chest",
    ],
    "Skateboarding": ["right-leg", "left-leg", "right-foot", "left-foot", "abdomen", "right-arm", "left-arm"],
    "Ultimate Frisbee": [
        "right-arm",
        "left-arm",
        "right-shoulder",
        "left-shoulder",
        "right-leg",
        "left-leg",
        "abdomen",
    ],
}

WORKOUT_TYPE_BODY_PART_MAP: Dict[str, List[str]] = {
    "Strength": [
        "right-arm",
        "left-arm",
        "chest",
        "abdomen",
        "right-leg",
        "left-leg",
        "right-shoulder",
        "left-shoulder",
    ],
    "Cardio": ["right-leg", "left-leg", "chest", "abdomen", "right-foot", "left-foot"],
    "HIIT": [
        "right-leg",
        "left-leg",
        "right-arm",
        "left-arm",
        "chest",
        "abdomen",
        "right-shoulder",
        "left-shoulder",
    ],
    "Flexibility": ["neck", "right-shoulder", "left-shoulder", "abdomen", "right-leg", "left-leg"],
    "Yoga": [
        "neck",
        "right-shoulder",
        "left-shoulder",
        "abdomen",
        "right-leg",
        "left-leg",
        "right-arm",
        "left-arm",
    ],
    "Pilates": ["abdomen", "right-shoulder", "left-shoulder", "right-leg", "left-leg"],
    "Plyometrics": ["right-leg", "left-leg", "right-foot", "left-foot", "abdomen"],
    "Endurance": ["right-leg", "left-leg", "chest", "abdomen", "right-foot", "left-foot"],
    "Powerlifting": [
        "right-leg",
        "left-leg",
        "chest",
        "right-shoulder",
        "left-shoulder",
        "right-arm",
        "left-arm",
        "abdomen",
    ],
    "Bodybuilding": [
        "chest",
        "right-shoulder",
        "left-shoulder",
        "right-arm",
        "left-arm",
        "right-leg",
        "left-leg",
        "abdomen",
    ],
    "Calisthenics": ["right-arm", "left-arm", "chest", "abdomen", "right-shoulder", "left-shoulder"],
    "Circuit Training": [
        "right-leg",
        "left-leg",
        "right-arm",
        "left-arm",
        "chest",
        "abdomen",
        "right-shoulder",
        "left-shoulder",
    ],
}

POSITION_SPECIFIC_BODY_PARTS: Dict[str, List[str]] = {
    "Quarterback": ["right-shoulder", "right-arm", "right-hand", "left-leg", "right-leg", "abdomen"],
    "Running Back": ["right-leg", "left-leg", "right-shoulder", "left-shoulder", "abdomen", "chest"],
    "Wide Receiver": ["right-leg", "left-leg", "right-hand", "left-hand", "right-shoulder", "left-shoulder"],
    "Linebacker": ["head", "neck", "right-shoulder", "left-shoulder", "chest", "right-leg", "left-leg"],
    "Defensive Back": ["right-leg", "left-leg", "right-shoulder", "left-shoulder", "head", "neck"],
    "Offensive Line": [
        "head",
        "neck",
        "right-shoulder",
        "left-shoulder",
        "right-leg",
        "left-leg",
        "abdomen",
        "chest",
    ],
    "Defensive Line": ["head", "neck", "right-shoulder", "left-shoulder", "right-arm", "left-arm", "chest"],
    "Tight End": ["right-shoulder", "left-shoulder", "right-leg", "left-leg", "chest", "right-hand", "left-hand"],
    "Kicker": ["right-leg", "right-foot", "left-leg", "abdomen"],
    "Point Guard": [
        "right-leg",
        "left-leg",
        "right-foot",
        "left-foot",
        "right-hand",
        "left-hand",
        "right-shoulder",
        "left-shoulder",
    ],
    "Shooting Guard": ["right-leg", "left-leg", "right-shoulder", "right-arm", "right-hand", "left-hand"],
    "Small Forward": [
        "right-leg",
        "left-leg",
        "right-shoulder",
        "left-shoulder",
        "right-arm",
        "left-arm",
        "abdomen",
    ],
    "Power Forward": ["right-leg", "left-leg", "right-shoulder", "left-shoulder", "chest", "abdomen"],
    "Center": [
        "right-leg",
        "left-leg",
        "right-shoulder",
        "left-shoulder",
        "chest",
        "abdomen",
        "right-arm",
        "left-arm",
    ],
    "Goalkeeper": [
        "right-hand",
        "left-hand",
        "right-arm",
        "left-arm",
        "right-leg",
        "left-leg",
        "right-shoulder",
        "left-shoulder",
    ],
    "Defender": ["right-leg", "left-leg", "head", "chest", "abdomen"],
    "Midfielder": ["right-leg", "left-leg", "right-foot", "left-foot", "abdomen", "chest"],
    "Forward": ["right-leg", "left-leg", "right-foot", "left-foot", "head", "abdomen"],
    "Striker": ["right-leg", "left-leg", "right-foot", "left-foot", "head"],
    "Pitcher": ["right-shoulder", "right-arm", "right-hand", "abdomen", "right-leg", "left-leg"],
    "Catcher": ["right-leg", "left-leg", "right-hand", "left-hand", "right-shoulder", "abdomen"],
    "Infielder": ["right-leg", "left-leg", "right-arm", "left-arm", "right-hand", "left-hand"],
    "Outfielder": ["right-leg", "left-leg", "right-arm", "right-shoulder", "right-hand"],
    "Singles Player": ["right-shoulder", "right-arm", "right-hand", "right-leg", "left-leg", "abdomen"],
    "Doubles Player": ["right-shoulder", "right-arm", "right-hand", "right-leg", "left-leg"],
}

SPORT_ALIASES: Dict[str, str] = {
    "basketball": "Basketball",
    "soccer": "Soccer",
    "football": "Football",
    "american football": "American Football",
    "rugby": "Rugby",
    "hockey": "Hockey",
    "ice hockey": "Ice Hockey",
    "field hockey": "Field Hockey",
    "volleyball": "Volleyball",
    "baseball": "Baseball",
    "softball": "Softball",
    "tennis": "Tennis",
    "badminton": "Badminton",
    "boxing": "Boxing",
    "mma": "MMA",
    "swimming": "Swimming",
    "cycling": "Cycling",
    "running": "Track and Field",
    "wrestling": "Wrestling",
    "martial arts": "MMA",
    "martial-arts": "MMA",
    "track and field": "Track and Field",
    "track & field": "Track and Field",
}

EXERCISE_ALIASES: Dict[str, str] = {
    "bench": "Bench Press",
    "squat": "Squats",
    "deadlift": "Deadlift",
    "pullup": "Pull-ups",
    "pull up": "Pull-ups",
    "pushup": "Push-ups",
    "push up": "Push-ups",
    "bicep curl": "Bicep Curls",
    "tricep dip": "Tricep Dips",
    "plank": "Plank",
    "running": "Running",
    "cycling": "Cycling",
    "swimming": "Swimming",
}

POSITION_MULTIPLIERS: Dict[str, Dict[str, float]] = {
    "Pitcher": {"right-shoulder": 1.8},
    "Quarterback": {"right-shoulder": 1.6},
    "Goalkeeper": {"right-hand": 1.5, "left-hand": 1.5},
    "Kicker": {"right-leg": 1.7},
}

SPORT_MULTIPLIERS: Dict[str, Dict[str, float]] = {
    "Boxing": {"right-shoulder": 1.5, "left-shoulder": 1.5},
    "Soccer": {"right-leg": 1.4, "left-leg": 1.4},
    "Swimming": {"right-shoulder": 1.5, "left-shoulder": 1.5},
}


def _unique(parts: Iterable[str]) -> List[str]:
    seen: Dict[str, None] = {}
    for part in parts:
        seen.setdefault(part, None)
    return list(seen)


def _exercise_name(exercise: Any) -> str:
    if isinstance(exercise, Mapping):
        return exercise.get("exercise") or ""
    return getattr(exercise, "exercise", None) or ""


def get_affected_body_parts(activity: Mapping[str, Any]) -> List[str]:
    """Body parts loaded by an activity, in first-seen order.

    Workouts use their exercises and fall back to the workout type; sports use
    the position table when the position is known and the sport table
    otherwise. When nothing matches, a generic full-body default is returned.

    Args:
        activity: Activity fields (``activity_type``, ``exercises``, ``workout_type``,
            ``sport``, ``position``)
    """
    parts: List[str] = []
    activity_type = activity.get("activity_type")

    if activity_type == "workout":
        for exercise in activity.get("exercises") or []:
            parts.extend(EXERCISE_BODY_PART_MAP.get(_exercise_name(exercise), []))
        if not parts and activity.get("workout_type"):
            parts.extend(WORKOUT_TYPE_BODY_PART_MAP.get(activity["workout_type"], []))

    if activity_type == "sports" and activity.get("sport"):
        position = activity.get("position")
        if position and position in POSITION_SPECIFIC_BODY_PARTS:
            parts.extend(POSITION_SPECIFIC_BODY_PARTS[position])
        else:
            parts.extend(SPORT_BODY_PART_MAP.get(activity["sport"], []))

    if not parts:
        logger.warning("No specific body parts detected for activity, using defaults")
        parts.extend(DEFAULT_BODY_PARTS)

    return _unique(parts)


def get_body_part_intensity_multiplier(body_part: str, activity: Mapping[str, Any]) -> float:
    """How much harder than average an activity works ``body_part``.

    Position overrides apply first and are replaced by sport overrides; a
    heavy compound exercise raises the multiplier to at least its own value.
    """
    multiplier = POSITION_MULTIPLIERS.get(activity.get("position") or "", {}).get(body_part, 1.0)
    multiplier = SPORT_MULTIPLIERS.get(activity.get("sport") or "", {}).get(body_part, multiplier)

    for exercise in activity.get("exercises") or []:
        name = _exercise_name(exercise)
        if name == "Deadlift" and (body_part == "abdomen" or "leg" in body_part):
            multiplier = max(multiplier, 1.6)
        elif name == "Bench Press" and body_part == "chest":
            multiplier = max(multiplier, 1.5)
        elif "Squat" in name and "leg" in body_part:
            multiplier = max(multiplier, 1.5)

    return multiplier


def normalize_sport_name(sport: Optional[str]) -> Optional[str]:
    """Canonical sport name for free-text input; unknown names pass through."""
    if not sport:
        return None
    return SPORT_ALIASES.get(sport.lower().strip(), sport)


def normalize_exercise_name(exercise: Optional[str]) -> Optional[str]:
    """Canonical exercise name for common shorthand; unknown names pass through."""
    if not exercise:
        return None
    return EXERCISE_ALIASES.get(exercise.lower().strip(), exercise)


def format_body_part_name(body_part: str) -> str:
    """``"right-shoulder"`` -> ``"Right Shoulder"``."""
    return " ".join(word[:1].upper() + word[1:] for word in body_part.split("-"))
