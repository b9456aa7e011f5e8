from __future__ import annotations


COMMON_INGREDIENTS: tuple[str, ...] = (
    # Proteins
    "chicken",
    "chicken breast",
    "chicken thighs",
    "chicken wings",
    "ground beef",
    "beef steak",
    "pork chops",
    "pork belly",
    "bacon",
    "ham",
    "sausage",
    "ground turkey",
    "lamb",
    "salmon",
    "tuna",
    "cod",
    "shrimp",
    "eggs",
    "tofu",
    "tempeh",
    # Dairy
    "milk",
    "butter",
    "heavy cream",
    "sour cream",
    "yogurt",
    "greek yogurt",
    "cheddar cheese",
    "mozzarella",
    "parmesan",
    "feta cheese",
    "cream cheese",
    "cottage cheese",
    # Vegetables
    "onion",
    "red onion",
    "green onion",
    "garlic",
    "tomato",
    "cherry tomatoes",
    "potato",
    "sweet potato",
    "carrot",
    "celery",
    "bell pepper",
    "red bell pepper",
    "jalapeno",
    "chili pepper",
    "broccoli",
    "cauliflower",
    "spinach",
    "kale",
    "lettuce",
    "cabbage",
    "zucchini",
    "eggplant",
    "cucumber",
    "mushrooms",
    "corn",
    "peas",
    "green beans",
    "asparagus",
    "avocado",
    "pumpkin",
    # Fruit
    "lemon",
    "lime",
    "orange",
    "apple",
    "banana",
    "strawberries",
    "blueberries",
    "pineapple",
    "mango",
    # Pantry
    "rice",
    "brown rice",
    "pasta",
    "spaghetti",
    "noodles",
    "bread",
    "tortillas",
    "flour",
    "oats",
    "quinoa",
    "black beans",
    "chickpeas",
    "lentils",
    "kidney beans",
    "canned tomatoes",
    "tomato paste",
    "chicken broth",
    "vegetable broth",
    "coconut milk",
    "peanut butter",
    "honey",
    "sugar",
    "brown sugar",
    "soy sauce",
    "vinegar",
    "olive oil",
    "sesame oil",
    "mustard",
    "mayonnaise",
    "ketchup",
    # Herbs and spices
    "basil",
    "cilantro",
    "parsley",
    "rosemary",
    "thyme",
    "oregano",
    "ginger",
    "cumin",
    "paprika",
    "cinnamon",
    "chili flakes",
    "curry powder",
    # Nuts
    "almonds",
    "walnuts",
    "cashews",
    "peanuts",
)
