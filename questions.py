# Built-in question catalog, one list per category.
# Served when the pool is thin and generation fails, so every category
# listed here must stay non-empty.

STATIC_CATALOG = {
    "tall_short": [
        {
            "q": "Which one is TALL?",
            "a": {"txt": "Giraffe", "icon": "🦒"},
            "b": {"txt": "Duck", "icon": "🦆"},
            "correct": "a",
        },
        {
            "q": "Which one is SHORT?",
            "a": {"txt": "Tree", "icon": "🌲"},
            "b": {"txt": "Mushroom", "icon": "🍄"},
            "correct": "b",
        },
    ],
    "big_small": [
        {
            "q": "Which one is BIG?",
            "a": {"txt": "Elephant", "icon": "🐘"},
            "b": {"txt": "Ant", "icon": "🐜"},
            "correct": "a",
        },
        {
            "q": "Which one is SMALL?",
            "a": {"txt": "Whale", "icon": "🐋"},
            "b": {"txt": "Ladybug", "icon": "🐞"},
            "correct": "b",
        },
    ],
    "fat_thin": [
        {
            "q": "Which one is FAT (Chubby)?",
            "a": {"txt": "Pufferfish", "icon": "🐡"},
            "b": {"txt": "Worm", "icon": "🐛"},
            "correct": "a",
        },
        {
            "q": "Which one is THIN?",
            "a": {"txt": "Pumpkin", "icon": "🎃"},
            "b": {"txt": "Pencil", "icon": "✏️"},
            "correct": "b",
        },
    ],
    "more_less": [
        {
            "q": "Which side has MORE?",
            "a": {"txt": "3 Cookies", "icon": "🍪🍪🍪"},
            "b": {"txt": "1 Cookie", "icon": "🍪"},
            "correct": "a",
        },
        {
            "q": "Which side has LESS?",
            "a": {"txt": "4 Balloons", "icon": "🎈🎈🎈🎈"},
            "b": {"txt": "2 Balloons", "icon": "🎈🎈"},
            "correct": "b",
        },
    ],
    "counting": [
        {
            "q": "How many Apples?",
            "display": "🍎🍎",
            "a": {"txt": "Two", "icon": "2"},
            "b": {"txt": "Five", "icon": "5"},
            "correct": "a",
        },
        {
            "q": "How many Stars?",
            "display": "⭐⭐⭐",
            "a": {"txt": "One", "icon": "1"},
            "b": {"txt": "Three", "icon": "3"},
            "correct": "b",
        },
    ],
    "colors": [
        {
            "q": "Which is RED?",
            "a": {"txt": "Apple", "icon": "🍎"},
            "b": {"txt": "Leaf", "icon": "🍃"},
            "correct": "a",
        },
        {
            "q": "Which is YELLOW?",
            "a": {"txt": "Grapes", "icon": "🍇"},
            "b": {"txt": "Banana", "icon": "🍌"},
            "correct": "b",
        },
        {
            "q": "Which is BLUE?",
            "a": {"txt": "Blue Heart", "icon": "💙"},
            "b": {"txt": "Carrot", "icon": "🥕"},
            "correct": "a",
        },
    ],
    "fast_slow": [
        {
            "q": "Which one is FAST?",
            "a": {"txt": "Rocket", "icon": "🚀"},
            "b": {"txt": "Snail", "icon": "🐌"},
            "correct": "a",
        },
        {
            "q": "Which one is SLOW?",
            "a": {"txt": "Car", "icon": "🏎️"},
            "b": {"txt": "Turtle", "icon": "🐢"},
            "correct": "b",
        },
    ],
    "hot_cold": [
        {
            "q": "Which one is HOT?",
            "a": {"txt": "Fire", "icon": "🔥"},
            "b": {"txt": "Snowman", "icon": "⛄"},
            "correct": "a",
        },
        {
            "q": "Which one is COLD?",
            "a": {"txt": "Sun", "icon": "☀️"},
            "b": {"txt": "Ice Cream", "icon": "🍦"},
            "correct": "b",
        },
    ],
}
