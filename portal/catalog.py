from typing import Any, Dict, List, Optional

# Statikus navigációs katalógus (csak olvasható)
MENUS: List[Dict[str, Any]] = [
    {"id": 1, "name": "Gyakori eszközök", "icon": "🔧", "order": 1},
    {"id": 2, "name": "Saját szolgáltatások", "icon": "💞", "order": 2},
    {"id": 3, "name": "AI platformok", "icon": "🤖", "order": 3},
    {"id": 4, "name": "Design anyagok", "icon": "🎨", "order": 4},
    {"id": 5, "name": "Szórakozás", "icon": "🎬", "order": 5},
    {"id": 6, "name": "Domain szolgáltatások", "icon": "🧰", "order": 6},
    {"id": 7, "name": "Fejlesztői források", "icon": "💻", "order": 7},
    {"id": 8, "name": "Közösség, blogok", "icon": "📚", "order": 8},
    {"id": 9, "name": "Egyéb eszközök", "icon": "🧰", "order": 9},
]

CARDS: List[Dict[str, Any]] = [
    {"id": 1, "menuId": 1, "title": "Google", "url": "https://google.com", "icon": "🌐",
     "description": "Globális keresőmotor"},
    {"id": 2, "menuId": 3, "title": "ChatGPT", "url": "https://chat.openai.com", "icon": "🤖",
     "description": "Beszélgető AI asszisztens"},
    {"id": 3, "menuId": 7, "title": "GitHub", "url": "https://github.com", "icon": "💻",
     "description": "Kódtárhely és együttműködés"},
    {"id": 4, "menuId": 7, "title": "Python Docs", "url": "https://docs.python.org/3/", "icon": "🐍",
     "description": "A Python hivatalos dokumentációja"},
]

ADS: List[Dict[str, Any]] = []
FRIENDS: List[Dict[str, Any]] = []


# Kártyák szűrése menü szerint; a menuId szövegként érkezik a query stringből
def cards_for_menu(menu_id: Optional[str]) -> List[Dict[str, Any]]:
    if not menu_id:
        return list(CARDS)
    return [c for c in CARDS if str(c["menuId"]) == menu_id.strip()]
