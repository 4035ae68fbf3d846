STARTER_QUOTES = [
    {"author": "Mark Twain", "text": "The secret of getting ahead is getting started."},
    {"author": "Mark Twain", "text": "Kindness is the language which the deaf can hear and the blind can see."},
    {"author": "Mark Twain", "text": "Whenever you find yourself on the side of the majority, it is time to pause and reflect."},
    {"author": "Oscar Wilde", "text": "Be yourself; everyone else is already taken."},
    {"author": "Oscar Wilde", "text": "Experience is simply the name we give our mistakes."},
    {"author": "Aristotle", "text": "We are what we repeatedly do. Excellence, then, is not an act, but a habit."},
    {"author": "Confucius", "text": "It does not matter how slowly you go as long as you do not stop."},
    {"author": "Seneca", "text": "Luck is what happens when preparation meets opportunity."},
    {"author": "Albert Einstein", "text": "Life is like riding a bicycle. To keep your balance you must keep moving."},
    {"author": "Maya Angelou", "text": "Nothing will work unless you do."},
]
