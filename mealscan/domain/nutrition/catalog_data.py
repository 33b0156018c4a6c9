"""Static per-unit nutrition data for the local catalog.

One record per serving unit (one piece, one bowl). Weights are strings like
"70g" and are parsed once when the catalog is built. Minerals and vitamin C
are in mg, macros in g.

Entry order matters: the partial-match pass walks the catalog in this order.
"""

from typing import Any, Dict

CATALOG_DATA: Dict[str, Dict[str, Any]] = {
    "paratha": {
        "display_name": "Plain Paratha",
        "weight": "70g",
        "nutrition": {
            "calories": 180, "protein": 4.0, "carbs": 28, "fat": 6.5, "fiber": 3.0,
            "sugar": 2, "sodium": 180, "iron": 1.8, "calcium": 25, "vitamin_c": 0
        },
        "category": "Indian Bread",
        "health_score": 7,
        "ingredients": ["wheat flour", "oil", "salt"],
        "tips": "Good source of carbohydrates and energy"
    },

    # North Indian main course
    "mix_veg": {
        "display_name": "Mix Veg",
        "weight": "150g",
        "nutrition": {
            "calories": 140, "protein": 5.2, "carbs": 18, "fat": 6.8, "fiber": 5.5,
            "sugar": 8, "sodium": 320, "iron": 2.4, "calcium": 85, "vitamin_c": 25
        },
        "category": "North Indian",
        "health_score": 8,
        "ingredients": ["mixed vegetables", "onion", "tomato", "spices", "oil"],
        "tips": "Rich in vitamins and minerals from fresh vegetables"
    },

    "aloo_jeera": {
        "display_name": "Aloo Jeera",
        "weight": "120g",
        "nutrition": {
            "calories": 165, "protein": 3.8, "carbs": 24, "fat": 7.2, "fiber": 3.2,
            "sugar": 3, "sodium": 280, "iron": 1.8, "calcium": 28, "vitamin_c": 12
        },
        "category": "North Indian",
        "health_score": 7,
        "ingredients": ["potato", "cumin", "turmeric", "oil", "coriander"],
        "tips": "Simple and flavorful potato preparation"
    },

    "aloo_gobhi": {
        "display_name": "Aloo Gobhi",
        "weight": "130g",
        "nutrition": {
            "calories": 155, "protein": 4.5, "carbs": 22, "fat": 6.8, "fiber": 4.2,
            "sugar": 6, "sodium": 300, "iron": 2.1, "calcium": 35, "vitamin_c": 45
        },
        "category": "North Indian",
        "health_score": 8,
        "ingredients": ["potato", "cauliflower", "turmeric", "ginger", "spices"],
        "tips": "Good source of vitamin C and fiber"
    },

    "gobhi_masala": {
        "display_name": "Gobhi Masala",
        "weight": "125g",
        "nutrition": {
            "calories": 148, "protein": 4.2, "carbs": 20, "fat": 7.0, "fiber": 4.8,
            "sugar": 7, "sodium": 310, "iron": 2.0, "calcium": 42, "vitamin_c": 50
        },
        "category": "North Indian",
        "health_score": 8,
        "ingredients": ["cauliflower", "onion", "tomato", "garam masala", "oil"],
        "tips": "High in vitamin C and antioxidants"
    },

    "aloo_mutter": {
        "display_name": "Aloo Mutter",
        "weight": "135g",
        "nutrition": {
            "calories": 162, "protein": 5.8, "carbs": 23, "fat": 6.5, "fiber": 5.2,
            "sugar": 8, "sodium": 290, "iron": 2.5, "calcium": 35, "vitamin_c": 18
        },
        "category": "North Indian",
        "health_score": 8,
        "ingredients": ["potato", "green peas", "tomato", "cumin", "coriander"],
        "tips": "Good protein from peas and complex carbs"
    },

    "banarasi_dum_aloo": {
        "display_name": "Banarasi Dum Aloo",
        "weight": "140g",
        "nutrition": {
            "calories": 195, "protein": 4.2, "carbs": 26, "fat": 9.5, "fiber": 3.8,
            "sugar": 5, "sodium": 380, "iron": 2.2, "calcium": 32, "vitamin_c": 15
        },
        "category": "North Indian",
        "health_score": 7,
        "ingredients": ["baby potato", "yogurt", "cashew", "garam masala", "ghee"],
        "tips": "Rich and creamy traditional recipe"
    },

    "kashmiri_dum_aloo": {
        "display_name": "Kashmiri Dum Aloo",
        "weight": "140g",
        "nutrition": {
            "calories": 210, "protein": 4.5, "carbs": 28, "fat": 10.2, "fiber": 4.0,
            "sugar": 6, "sodium": 350, "iron": 2.4, "calcium": 38, "vitamin_c": 12
        },
        "category": "North Indian",
        "health_score": 7,
        "ingredients": ["baby potato", "yogurt", "fennel", "saffron", "ghee"],
        "tips": "Aromatic Kashmiri specialty with unique spices"
    },

    "aloo_bhurji": {
        "display_name": "Aloo Bhurji",
        "weight": "110g",
        "nutrition": {
            "calories": 145, "protein": 3.5, "carbs": 20, "fat": 6.8, "fiber": 2.8,
            "sugar": 4, "sodium": 260, "iron": 1.6, "calcium": 22, "vitamin_c": 18
        },
        "category": "North Indian",
        "health_score": 7,
        "ingredients": ["potato", "onion", "green chili", "turmeric", "coriander"],
        "tips": "Light and spiced mashed potato dish"
    },

    "baingan_bharta": {
        "display_name": "Baingan Bharta",
        "weight": "130g",
        "nutrition": {
            "calories": 125, "protein": 3.8, "carbs": 15, "fat": 6.5, "fiber": 6.2,
            "sugar": 9, "sodium": 280, "iron": 1.8, "calcium": 28, "vitamin_c": 8
        },
        "category": "North Indian",
        "health_score": 8,
        "ingredients": ["eggplant", "onion", "tomato", "garlic", "mustard oil"],
        "tips": "High fiber and low calorie vegetable dish"
    },

    "bhindi_masala": {
        "display_name": "Bhindi Masala",
        "weight": "120g",
        "nutrition": {
            "calories": 135, "protein": 4.2, "carbs": 16, "fat": 7.0, "fiber": 5.8,
            "sugar": 4, "sodium": 240, "iron": 2.0, "calcium": 65, "vitamin_c": 22
        },
        "category": "North Indian",
        "health_score": 8,
        "ingredients": ["okra", "onion", "turmeric", "coriander", "oil"],
        "tips": "Rich in fiber and vitamin C"
    },

    "keema_gobhi_mutter": {
        "display_name": "Keema Gobhi Mutter",
        "weight": "145g",
        "nutrition": {
            "calories": 185, "protein": 8.5, "carbs": 18, "fat": 9.2, "fiber": 4.5,
            "sugar": 8, "sodium": 380, "iron": 3.2, "calcium": 45, "vitamin_c": 35
        },
        "category": "North Indian",
        "health_score": 7,
        "ingredients": ["soy keema", "cauliflower", "peas", "garam masala", "oil"],
        "tips": "High protein vegetarian keema alternative"
    },

    "palak_chana": {
        "display_name": "Palak Chana",
        "weight": "140g",
        "nutrition": {
            "calories": 168, "protein": 8.8, "carbs": 22, "fat": 5.5, "fiber": 8.2,
            "sugar": 5, "sodium": 320, "iron": 4.5, "calcium": 125, "vitamin_c": 28
        },
        "category": "North Indian",
        "health_score": 9,
        "ingredients": ["spinach", "chickpeas", "onion", "garlic", "cumin"],
        "tips": "Excellent source of iron and protein"
    },

    "palak_corn": {
        "display_name": "Palak Corn",
        "weight": "130g",
        "nutrition": {
            "calories": 142, "protein": 6.2, "carbs": 20, "fat": 5.8, "fiber": 5.5,
            "sugar": 8, "sodium": 280, "iron": 3.8, "calcium": 105, "vitamin_c": 32
        },
        "category": "North Indian",
        "health_score": 8,
        "ingredients": ["spinach", "sweet corn", "onion", "garlic", "spices"],
        "tips": "Rich in iron from spinach and fiber from corn"
    },

    "palak_kofta": {
        "display_name": "Palak Kofta",
        "weight": "160g",
        "nutrition": {
            "calories": 195, "protein": 7.5, "carbs": 18, "fat": 12.0, "fiber": 4.8,
            "sugar": 6, "sodium": 350, "iron": 4.2, "calcium": 145, "vitamin_c": 25
        },
        "category": "North Indian",
        "health_score": 7,
        "ingredients": ["spinach kofta", "spinach gravy", "paneer", "cream", "spices"],
        "tips": "Protein-rich with iron from spinach"
    },

    "tomato_chutney": {
        "display_name": "Tomato Chutney",
        "weight": "50g",
        "nutrition": {
            "calories": 45, "protein": 1.8, "carbs": 8, "fat": 1.2, "fiber": 2.2,
            "sugar": 6, "sodium": 180, "iron": 0.8, "calcium": 15, "vitamin_c": 18
        },
        "category": "Condiment",
        "health_score": 7,
        "ingredients": ["tomato", "tamarind", "jaggery", "mustard seeds", "chili"],
        "tips": "Rich in vitamin C and antioxidants"
    },

    "black_chana_masala": {
        "display_name": "Black Chana Masala",
        "weight": "150g",
        "nutrition": {
            "calories": 185, "protein": 10.5, "carbs": 26, "fat": 6.2, "fiber": 9.5,
            "sugar": 4, "sodium": 380, "iron": 4.8, "calcium": 65, "vitamin_c": 8
        },
        "category": "North Indian",
        "health_score": 9,
        "ingredients": ["black chickpeas", "onion", "tomato", "garam masala", "oil"],
        "tips": "Excellent source of plant protein and fiber"
    },

    "white_chana_masala": {
        "display_name": "White Chana Masala",
        "weight": "150g",
        "nutrition": {
            "calories": 175, "protein": 9.8, "carbs": 25, "fat": 5.8, "fiber": 8.8,
            "sugar": 5, "sodium": 360, "iron": 4.2, "calcium": 58, "vitamin_c": 10
        },
        "category": "North Indian",
        "health_score": 9,
        "ingredients": ["white chickpeas", "onion", "tomato", "cumin", "coriander"],
        "tips": "High protein and fiber legume preparation"
    },

    "veg_kofta": {
        "display_name": "Veg Kofta",
        "weight": "180g",
        "nutrition": {
            "calories": 225, "protein": 8.2, "carbs": 22, "fat": 13.5, "fiber": 4.5,
            "sugar": 8, "sodium": 420, "iron": 2.8, "calcium": 85, "vitamin_c": 15
        },
        "category": "North Indian",
        "health_score": 6,
        "ingredients": ["mixed vegetable kofta", "tomato gravy", "cashew", "cream"],
        "tips": "Rich and creamy - enjoy in moderation"
    },

    "malai_kofta": {
        "display_name": "Malai Kofta",
        "weight": "180g",
        "nutrition": {
            "calories": 245, "protein": 9.5, "carbs": 20, "fat": 16.2, "fiber": 3.8,
            "sugar": 9, "sodium": 380, "iron": 2.5, "calcium": 125, "vitamin_c": 12
        },
        "category": "North Indian",
        "health_score": 6,
        "ingredients": ["paneer kofta", "cream gravy", "cashew", "butter", "spices"],
        "tips": "High in protein but also high in calories"
    },

    "kadhi_pakora": {
        "display_name": "Kadhi Pakora",
        "weight": "200g",
        "nutrition": {
            "calories": 185, "protein": 6.8, "carbs": 20, "fat": 9.5, "fiber": 3.2,
            "sugar": 8, "sodium": 420, "iron": 2.2, "calcium": 95, "vitamin_c": 5
        },
        "category": "North Indian",
        "health_score": 7,
        "ingredients": ["yogurt curry", "besan pakora", "turmeric", "ginger", "cumin"],
        "tips": "Probiotic benefits from yogurt"
    },

    # Dal varieties
    "dal_makhani": {
        "display_name": "Dal Makhani",
        "weight": "150g",
        "nutrition": {
            "calories": 210, "protein": 12.5, "carbs": 24, "fat": 8.8, "fiber": 9.2,
            "sugar": 4, "sodium": 380, "iron": 4.8, "calcium": 85, "vitamin_c": 3
        },
        "category": "Dal",
        "health_score": 8,
        "ingredients": ["black dal", "kidney beans", "butter", "cream", "tomato"],
        "tips": "Rich source of plant protein and iron"
    },

    "yellow_dal": {
        "display_name": "Yellow Dal",
        "weight": "150g",
        "nutrition": {
            "calories": 155, "protein": 11.2, "carbs": 22, "fat": 4.5, "fiber": 8.5,
            "sugar": 3, "sodium": 280, "iron": 4.2, "calcium": 45, "vitamin_c": 2
        },
        "category": "Dal",
        "health_score": 9,
        "ingredients": ["yellow lentils", "turmeric", "cumin", "garlic", "coriander"],
        "tips": "Complete protein source with high fiber"
    },

    "punjabi_dal_tadka": {
        "display_name": "Punjabi Dal Tadka",
        "weight": "150g",
        "nutrition": {
            "calories": 168, "protein": 11.8, "carbs": 23, "fat": 5.2, "fiber": 8.8,
            "sugar": 3, "sodium": 320, "iron": 4.5, "calcium": 52, "vitamin_c": 5
        },
        "category": "Dal",
        "health_score": 9,
        "ingredients": ["mixed lentils", "onion", "tomato", "ghee", "whole spices"],
        "tips": "Traditional Punjabi style with rich flavor"
    },

    "rajma_tadka": {
        "display_name": "Rajma Tadka",
        "weight": "150g",
        "nutrition": {
            "calories": 195, "protein": 12.8, "carbs": 26, "fat": 6.2, "fiber": 10.5,
            "sugar": 4, "sodium": 380, "iron": 4.8, "calcium": 65, "vitamin_c": 8
        },
        "category": "Dal",
        "health_score": 9,
        "ingredients": ["kidney beans", "onion", "tomato", "garam masala", "oil"],
        "tips": "Excellent source of protein and fiber"
    },

    "white_chana_gravy": {
        "display_name": "White Chana Gravy",
        "weight": "150g",
        "nutrition": {
            "calories": 182, "protein": 10.2, "carbs": 25, "fat": 6.0, "fiber": 9.2,
            "sugar": 5, "sodium": 350, "iron": 4.5, "calcium": 62, "vitamin_c": 12
        },
        "category": "Dal",
        "health_score": 9,
        "ingredients": ["white chickpeas", "onion gravy", "tomato", "cumin", "bay leaves"],
        "tips": "High protein legume with complex carbs"
    },

    "black_chana_gravy": {
        "display_name": "Black Chana Gravy",
        "weight": "150g",
        "nutrition": {
            "calories": 188, "protein": 10.8, "carbs": 26, "fat": 6.2, "fiber": 9.8,
            "sugar": 4, "sodium": 370, "iron": 5.2, "calcium": 68, "vitamin_c": 10
        },
        "category": "Dal",
        "health_score": 9,
        "ingredients": ["black chickpeas", "onion", "tomato", "garam masala", "oil"],
        "tips": "Higher iron content than white chickpeas"
    },

    # Tandoor breads
    "tandoori_roti": {
        "display_name": "Tandoori Roti",
        "weight": "60g",
        "nutrition": {
            "calories": 140, "protein": 4.8, "carbs": 26, "fat": 2.2, "fiber": 3.5,
            "sugar": 1, "sodium": 200, "iron": 2.0, "calcium": 25, "vitamin_c": 0
        },
        "category": "Tandoor Bread",
        "health_score": 8,
        "ingredients": ["wheat flour", "water", "salt"],
        "tips": "Healthy whole wheat bread option"
    },

    "tandoori_butter_roti": {
        "display_name": "Tandoori Butter Roti",
        "weight": "65g",
        "nutrition": {
            "calories": 165, "protein": 5.0, "carbs": 26, "fat": 5.8, "fiber": 3.5,
            "sugar": 1, "sodium": 220, "iron": 2.0, "calcium": 28, "vitamin_c": 0
        },
        "category": "Tandoor Bread",
        "health_score": 7,
        "ingredients": ["wheat flour", "butter", "water", "salt"],
        "tips": "Buttery flavor with extra calories"
    },

    "butter_naan": {
        "display_name": "Butter Naan",
        "weight": "80g",
        "nutrition": {
            "calories": 220, "protein": 6.2, "carbs": 35, "fat": 7.5, "fiber": 2.0,
            "sugar": 3, "sodium": 380, "iron": 2.2, "calcium": 45, "vitamin_c": 0
        },
        "category": "Tandoor Bread",
        "health_score": 6,
        "ingredients": ["refined flour", "yogurt", "butter", "yeast", "sugar"],
        "tips": "Soft and buttery but higher in calories"
    },

    "plain_naan": {
        "display_name": "Plain Naan",
        "weight": "75g",
        "nutrition": {
            "calories": 195, "protein": 5.8, "carbs": 35, "fat": 4.2, "fiber": 1.8,
            "sugar": 3, "sodium": 350, "iron": 2.0, "calcium": 40, "vitamin_c": 0
        },
        "category": "Tandoor Bread",
        "health_score": 6,
        "ingredients": ["refined flour", "yogurt", "yeast", "oil", "salt"],
        "tips": "Classic Indian bread - pairs well with curry"
    },

    "lachha_parantha": {
        "display_name": "Lachha Parantha",
        "weight": "85g",
        "nutrition": {
            "calories": 240, "protein": 6.0, "carbs": 32, "fat": 10.5, "fiber": 3.2,
            "sugar": 2, "sodium": 280, "iron": 2.2, "calcium": 35, "vitamin_c": 0
        },
        "category": "Tandoor Bread",
        "health_score": 6,
        "ingredients": ["wheat flour", "ghee", "oil", "salt"],
        "tips": "Layered bread with higher fat content"
    },

    "mirchi_lachha_parantha": {
        "display_name": "Mirchi Lachha Parantha",
        "weight": "90g",
        "nutrition": {
            "calories": 255, "protein": 6.5, "carbs": 33, "fat": 11.2, "fiber": 3.8,
            "sugar": 2, "sodium": 320, "iron": 2.4, "calcium": 38, "vitamin_c": 15
        },
        "category": "Tandoor Bread",
        "health_score": 6,
        "ingredients": ["wheat flour", "green chili", "ghee", "coriander", "salt"],
        "tips": "Spicy layered bread with vitamin C from chilies"
    },

    "garlic_naan": {
        "display_name": "Garlic Naan",
        "weight": "80g",
        "nutrition": {
            "calories": 205, "protein": 6.0, "carbs": 34, "fat": 5.5, "fiber": 2.2,
            "sugar": 3, "sodium": 370, "iron": 2.2, "calcium": 42, "vitamin_c": 2
        },
        "category": "Tandoor Bread",
        "health_score": 7,
        "ingredients": ["refined flour", "garlic", "butter", "yogurt", "herbs"],
        "tips": "Garlic provides antioxidants and flavor"
    },

    "stuffed_kulcha": {
        "display_name": "Stuffed Kulcha",
        "weight": "100g",
        "nutrition": {
            "calories": 280, "protein": 8.5, "carbs": 38, "fat": 11.0, "fiber": 4.0,
            "sugar": 3, "sodium": 420, "iron": 2.8, "calcium": 55, "vitamin_c": 8
        },
        "category": "Tandoor Bread",
        "health_score": 6,
        "ingredients": ["refined flour", "potato stuffing", "yogurt", "ghee", "spices"],
        "tips": "Filling bread with vegetable stuffing"
    },

    # Tawa breads
    "tawa_roti": {
        "display_name": "Tawa Roti",
        "weight": "50g",
        "nutrition": {
            "calories": 120, "protein": 3.5, "carbs": 22, "fat": 1.2, "fiber": 2.8,
            "sugar": 1, "sodium": 150, "iron": 1.5, "calcium": 18, "vitamin_c": 0
        },
        "category": "Tawa Bread",
        "health_score": 8,
        "ingredients": ["wheat flour", "water", "salt"],
        "tips": "Simple and healthy whole wheat bread"
    },

    "tawa_butter_roti": {
        "display_name": "Tawa Butter Roti",
        "weight": "55g",
        "nutrition": {
            "calories": 145, "protein": 3.8, "carbs": 22, "fat": 4.8, "fiber": 2.8,
            "sugar": 1, "sodium": 170, "iron": 1.5, "calcium": 22, "vitamin_c": 0
        },
        "category": "Tawa Bread",
        "health_score": 7,
        "ingredients": ["wheat flour", "butter", "water", "salt"],
        "tips": "Buttery version with extra flavor"
    },

    "plain_parantha": {
        "display_name": "Plain Parantha",
        "weight": "70g",
        "nutrition": {
            "calories": 180, "protein": 4.0, "carbs": 28, "fat": 6.5, "fiber": 3.0,
            "sugar": 2, "sodium": 180, "iron": 1.8, "calcium": 25, "vitamin_c": 0
        },
        "category": "Tawa Bread",
        "health_score": 7,
        "ingredients": ["wheat flour", "oil", "salt"],
        "tips": "Classic Indian flatbread"
    },

    # Paneer specialties
    "shahi_paneer": {
        "display_name": "Shahi Paneer",
        "weight": "180g",
        "nutrition": {
            "calories": 285, "protein": 16.5, "carbs": 15, "fat": 20.5, "fiber": 2.8,
            "sugar": 8, "sodium": 420, "iron": 2.2, "calcium": 285, "vitamin_c": 12
        },
        "category": "Paneer Special",
        "health_score": 6,
        "ingredients": ["paneer", "cashew gravy", "cream", "tomato", "spices"],
        "tips": "High protein but also high in calories"
    },

    "kadai_paneer": {
        "display_name": "Kadai Paneer",
        "weight": "170g",
        "nutrition": {
            "calories": 265, "protein": 15.8, "carbs": 12, "fat": 18.2, "fiber": 3.2,
            "sugar": 6, "sodium": 380, "iron": 2.0, "calcium": 275, "vitamin_c": 35
        },
        "category": "Paneer Special",
        "health_score": 7,
        "ingredients": ["paneer", "bell peppers", "onion", "tomato", "kadai masala"],
        "tips": "Good protein with vegetables"
    },

    "achari_paneer": {
        "display_name": "Achari Paneer",
        "weight": "175g",
        "nutrition": {
            "calories": 275, "protein": 16.2, "carbs": 14, "fat": 19.0, "fiber": 2.5,
            "sugar": 7, "sodium": 450, "iron": 2.2, "calcium": 280, "vitamin_c": 15
        },
        "category": "Paneer Special",
        "health_score": 6,
        "ingredients": ["paneer", "pickle spices", "yogurt", "onion", "oil"],
        "tips": "Tangy flavor with high sodium content"
    },

    "mutter_paneer": {
        "display_name": "Mutter Paneer",
        "weight": "170g",
        "nutrition": {
            "calories": 245, "protein": 15.5, "carbs": 16, "fat": 15.8, "fiber": 4.5,
            "sugar": 8, "sodium": 360, "iron": 2.8, "calcium": 270, "vitamin_c": 25
        },
        "category": "Paneer Special",
        "health_score": 7,
        "ingredients": ["paneer", "green peas", "tomato gravy", "garam masala"],
        "tips": "Added fiber and vitamins from peas"
    },

    "cheese_tomato": {
        "display_name": "Cheese Tomato",
        "weight": "160g",
        "nutrition": {
            "calories": 220, "protein": 12.5, "carbs": 12, "fat": 14.8, "fiber": 2.8,
            "sugar": 9, "sodium": 380, "iron": 1.5, "calcium": 245, "vitamin_c": 28
        },
        "category": "Paneer Special",
        "health_score": 7,
        "ingredients": ["cheese", "fresh tomato", "onion", "herbs", "cream"],
        "tips": "Rich in vitamin C from tomatoes"
    },

    "paneer_do_piaza": {
        "display_name": "Paneer Do Piaza",
        "weight": "175g",
        "nutrition": {
            "calories": 255, "protein": 15.2, "carbs": 18, "fat": 16.5, "fiber": 3.5,
            "sugar": 10, "sodium": 370, "iron": 2.0, "calcium": 275, "vitamin_c": 18
        },
        "category": "Paneer Special",
        "health_score": 7,
        "ingredients": ["paneer", "onion", "bell peppers", "tomato", "garam masala"],
        "tips": "Double onion preparation with good protein"
    },

    "palak_paneer": {
        "display_name": "Palak Paneer",
        "weight": "170g",
        "nutrition": {
            "calories": 235, "protein": 16.0, "carbs": 12, "fat": 16.2, "fiber": 4.2,
            "sugar": 5, "sodium": 340, "iron": 4.8, "calcium": 320, "vitamin_c": 22
        },
        "category": "Paneer Special",
        "health_score": 8,
        "ingredients": ["paneer", "spinach", "garlic", "ginger", "cream"],
        "tips": "Excellent source of iron and calcium"
    },

    "paneer_butter_masala": {
        "display_name": "Paneer Butter Masala",
        "weight": "180g",
        "nutrition": {
            "calories": 295, "protein": 16.8, "carbs": 16, "fat": 21.5, "fiber": 3.0,
            "sugar": 10, "sodium": 420, "iron": 2.2, "calcium": 290, "vitamin_c": 15
        },
        "category": "Paneer Special",
        "health_score": 6,
        "ingredients": ["paneer", "butter", "tomato gravy", "cream", "cashew"],
        "tips": "Rich and creamy - high in calories"
    },

    "paneer_tikka_butter_masala": {
        "display_name": "Paneer Tikka Butter Masala",
        "weight": "185g",
        "nutrition": {
            "calories": 315, "protein": 17.5, "carbs": 18, "fat": 23.0, "fiber": 3.2,
            "sugar": 12, "sodium": 450, "iron": 2.5, "calcium": 295, "vitamin_c": 18
        },
        "category": "Paneer Special",
        "health_score": 6,
        "ingredients": ["grilled paneer", "butter masala", "cream", "tomato", "spices"],
        "tips": "Grilled paneer in rich gravy"
    },

    # Rice and pulao
    "plain_rice": {
        "display_name": "Plain Rice",
        "weight": "150g",
        "nutrition": {
            "calories": 165, "protein": 3.8, "carbs": 36, "fat": 0.5, "fiber": 0.8,
            "sugar": 0, "sodium": 5, "iron": 1.2, "calcium": 15, "vitamin_c": 0
        },
        "category": "Rice",
        "health_score": 6,
        "ingredients": ["basmati rice", "water", "salt"],
        "tips": "Simple carbohydrate source"
    },

    "jeera_rice": {
        "display_name": "Jeera Rice",
        "weight": "150g",
        "nutrition": {
            "calories": 185, "protein": 4.0, "carbs": 36, "fat": 3.2, "fiber": 1.0,
            "sugar": 0, "sodium": 180, "iron": 1.5, "calcium": 18, "vitamin_c": 0
        },
        "category": "Rice",
        "health_score": 7,
        "ingredients": ["basmati rice", "cumin", "ghee", "bay leaves"],
        "tips": "Aromatic rice with digestive cumin"
    },

    "veg_pulao": {
        "display_name": "Veg Pulao",
        "weight": "180g",
        "nutrition": {
            "calories": 245, "protein": 6.5, "carbs": 42, "fat": 6.8, "fiber": 3.2,
            "sugar": 4, "sodium": 320, "iron": 2.2, "calcium": 35, "vitamin_c": 15
        },
        "category": "Rice",
        "health_score": 7,
        "ingredients": ["basmati rice", "mixed vegetables", "whole spices", "ghee"],
        "tips": "Nutritious one-pot meal with vegetables"
    },

    "gobhi_rice": {
        "display_name": "Gobhi Rice",
        "weight": "170g",
        "nutrition": {
            "calories": 225, "protein": 5.8, "carbs": 40, "fat": 5.5, "fiber": 3.8,
            "sugar": 5, "sodium": 280, "iron": 2.0, "calcium": 32, "vitamin_c": 25
        },
        "category": "Rice",
        "health_score": 7,
        "ingredients": ["basmati rice", "cauliflower", "turmeric", "cumin", "oil"],
        "tips": "Cauliflower adds vitamins and fiber"
    },

    "veg_biryani": {
        "display_name": "Veg Biryani",
        "weight": "250g",
        "nutrition": {
            "calories": 385, "protein": 9.5, "carbs": 58, "fat": 14.2, "fiber": 4.5,
            "sugar": 6, "sodium": 520, "iron": 3.2, "calcium": 65, "vitamin_c": 18
        },
        "category": "Rice",
        "health_score": 7,
        "ingredients": ["basmati rice", "mixed vegetables", "yogurt", "saffron", "ghee"],
        "tips": "Festive rice dish with aromatic spices"
    },

    "hyderabadi_biryani": {
        "display_name": "Hyderabadi Biryani",
        "weight": "260g",
        "nutrition": {
            "calories": 420, "protein": 11.2, "carbs": 62, "fat": 16.5, "fiber": 5.0,
            "sugar": 7, "sodium": 580, "iron": 3.5, "calcium": 75, "vitamin_c": 20
        },
        "category": "Rice",
        "health_score": 7,
        "ingredients": ["basmati rice", "vegetables", "yogurt", "saffron", "fried onions"],
        "tips": "Traditional Hyderabadi style preparation"
    },

    "paneer_biryani": {
        "display_name": "Paneer Biryani",
        "weight": "270g",
        "nutrition": {
            "calories": 445, "protein": 16.8, "carbs": 58, "fat": 18.2, "fiber": 4.8,
            "sugar": 8, "sodium": 620, "iron": 3.2, "calcium": 285, "vitamin_c": 15
        },
        "category": "Rice",
        "health_score": 7,
        "ingredients": ["basmati rice", "paneer", "yogurt", "saffron", "whole spices"],
        "tips": "High protein biryani with paneer"
    },

    "veg_fried_rice": {
        "display_name": "Veg Fried Rice",
        "weight": "200g",
        "nutrition": {
            "calories": 285, "protein": 7.2, "carbs": 48, "fat": 8.5, "fiber": 3.5,
            "sugar": 5, "sodium": 480, "iron": 2.5, "calcium": 45, "vitamin_c": 22
        },
        "category": "Rice",
        "health_score": 6,
        "ingredients": ["rice", "mixed vegetables", "soy sauce", "garlic", "oil"],
        "tips": "Indo-Chinese style fried rice"
    },

    "chilly_garlic_rice": {
        "display_name": "Chilly Garlic Rice",
        "weight": "190g",
        "nutrition": {
            "calories": 265, "protein": 6.0, "carbs": 45, "fat": 7.8, "fiber": 2.8,
            "sugar": 4, "sodium": 520, "iron": 2.2, "calcium": 35, "vitamin_c": 18
        },
        "category": "Rice",
        "health_score": 6,
        "ingredients": ["rice", "green chili", "garlic", "soy sauce", "oil"],
        "tips": "Spicy and flavorful Chinese-style rice"
    },

    # Thalis
    "normal_thali": {
        "display_name": "Normal Thali",
        "weight": "400g",
        "nutrition": {
            "calories": 520, "protein": 18.5, "carbs": 72, "fat": 18.2, "fiber": 12.5,
            "sugar": 15, "sodium": 680, "iron": 6.8, "calcium": 185, "vitamin_c": 35
        },
        "category": "Complete Meal",
        "health_score": 8,
        "ingredients": ["tawa butter chapati", "rice", "dal", "raita", "salad", "pickle"],
        "tips": "Well-balanced complete meal"
    },

    "nk_special_thali": {
        "display_name": "NK Special Thali",
        "weight": "450g",
        "nutrition": {
            "calories": 625, "protein": 22.8, "carbs": 78, "fat": 24.5, "fiber": 14.2,
            "sugar": 18, "sodium": 820, "iron": 8.2, "calcium": 245, "vitamin_c": 42
        },
        "category": "Complete Meal",
        "health_score": 8,
        "ingredients": ["tandoori butter roti", "flavoured rice", "sabji", "dal", "raita", "salad", "paneer sabji", "dessert"],
        "tips": "Premium thali with paneer dish"
    },

    # Desserts
    "gulab_jamun": {
        "display_name": "Gulab Jamun",
        "weight": "60g",
        "nutrition": {
            "calories": 185, "protein": 3.2, "carbs": 28, "fat": 7.5, "fiber": 0.5,
            "sugar": 25, "sodium": 25, "iron": 0.8, "calcium": 65, "vitamin_c": 0
        },
        "category": "Dessert",
        "health_score": 3,
        "ingredients": ["milk powder", "sugar syrup", "ghee", "cardamom"],
        "tips": "High sugar dessert - enjoy occasionally"
    },

    "moong_dal_halwa": {
        "display_name": "Moong Dal Halwa",
        "weight": "80g",
        "nutrition": {
            "calories": 220, "protein": 6.8, "carbs": 32, "fat": 8.5, "fiber": 2.8,
            "sugar": 28, "sodium": 15, "iron": 2.2, "calcium": 45, "vitamin_c": 0
        },
        "category": "Dessert",
        "health_score": 4,
        "ingredients": ["moong dal", "sugar", "ghee", "milk", "cardamom"],
        "tips": "Traditional sweet with protein from lentils"
    },

    "stick_kulfi": {
        "display_name": "Stick Kulfi",
        "weight": "70g",
        "nutrition": {
            "calories": 145, "protein": 4.2, "carbs": 18, "fat": 6.8, "fiber": 0,
            "sugar": 16, "sodium": 35, "iron": 0.5, "calcium": 125, "vitamin_c": 1
        },
        "category": "Dessert",
        "health_score": 4,
        "ingredients": ["milk", "sugar", "cardamom", "pistachios"],
        "tips": "Traditional Indian ice cream"
    },

    "ice_cream": {
        "display_name": "Ice Cream",
        "weight": "75g",
        "nutrition": {
            "calories": 135, "protein": 3.8, "carbs": 16, "fat": 6.2, "fiber": 0,
            "sugar": 14, "sodium": 45, "iron": 0.3, "calcium": 95, "vitamin_c": 1
        },
        "category": "Dessert",
        "health_score": 4,
        "ingredients": ["milk", "cream", "sugar", "flavoring"],
        "tips": "Cool treat with calcium from dairy"
    },

    # Snacks
    "aloo_bonda": {
        "display_name": "Aloo Bonda",
        "weight": "45g",
        "nutrition": {
            "calories": 120, "protein": 2.5, "carbs": 15, "fat": 6.0, "fiber": 1.5,
            "sugar": 1, "sodium": 210, "iron": 0.9, "calcium": 20, "vitamin_c": 6
        },
        "category": "Snack",
        "health_score": 5,
        "ingredients": ["potato", "besan", "spices", "oil"],
        "tips": "Deep fried snack - pair with a lighter side"
    },
}
