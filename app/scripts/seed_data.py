# scripts/seed_data.py
import asyncio
import logging
from app.core.db import init_db, close_db
from app.models.account import Employee, Manager
from app.models.restaurant import MenuCategory, MenuItem, Restaurant, TechPark

log = logging.getLogger("seed_data")

TECH_PARKS = [
    {"name": "Manyata Tech Park", "location": "Hebbal, Bangalore",
     "description": "Bangalore's largest tech park with 300+ companies", "total_outlets": 15},
    {"name": "Electronic City", "location": "Electronic City, Bangalore",
     "description": "IT hub with major tech companies", "total_outlets": 12},
    {"name": "Whitefield Tech Park", "location": "Whitefield, Bangalore",
     "description": "Premium tech park in East Bangalore", "total_outlets": 10},
]

MANAGERS = [
    {"username": "canteendelight", "password": "password123", "name": "Suresh Kumar",
     "email": "manager@canteendelight.com", "tech_park": "Manyata Tech Park"},
    {"username": "northspice", "password": "password123", "name": "Harpreet Singh",
     "email": "admin@northspice.com", "tech_park": "Manyata Tech Park"},
]

# Restaurant -> (manager username, details, {category: [(name, description, price, is_veg)]})
RESTAURANTS = [
    ("canteendelight", {
        "name": "Canteen Delight", "description": "Traditional thali and home-style meals",
        "cuisine": "North Indian, Thali", "rating": 4.5, "distance": 50, "preparation_time": "10-15 min",
        "price_range": "₹", "location": {"lat": 13.0475, "lng": 77.6200},
    }, {
        "Main Course": [("Paneer Butter Masala", "Rich creamy paneer curry with butter and tomatoes", 120, True)],
        "Breads": [("Roti", "Fresh wheat flatbread", 15, True)],
        "Dal & Rice": [("Dal Tadka", "Traditional yellow lentils with spiced tempering", 100, True),
                       ("Jeera Rice", "Aromatic basmati rice with cumin", 80, True)],
    }),
    ("northspice", {
        "name": "North Spice Dhaba", "description": "Authentic North Indian sabji, roti, dal",
        "cuisine": "North Indian, Punjabi", "rating": 4.3, "distance": 80, "preparation_time": "12-18 min",
        "price_range": "₹₹", "location": {"lat": 13.0481, "lng": 77.6212},
    }, {
        "North Indian": [("Rajma Chawal", "Kidney beans curry with steamed rice", 140, True),
                         ("Chole Bhature", "Spicy chickpeas with fried bread", 110, True)],
        "Breads & Rice": [("Butter Naan", "Soft leavened bread with butter", 25, True)],
    }),
    (None, {
        "name": "South Express", "description": "Fresh idli, dosa, sambar varieties",
        "cuisine": "South Indian", "rating": 4.6, "distance": 120, "preparation_time": "8-12 min",
        "price_range": "₹", "delivery_available": False,
    }, {
        "South Indian": [("Masala Dosa", "Crispy rice crepe with spiced potato filling", 60, True),
                         ("Idli Sambar", "Steamed rice cakes with lentil curry", 50, True)],
        "Beverages": [("Filter Coffee", "Traditional South Indian coffee", 40, True)],
    }),
    (None, {
        "name": "Quick Bites Cafe", "description": "Sandwiches, burgers, shakes & snacks",
        "cuisine": "Continental, Fast Food", "rating": 4.2, "distance": 90, "preparation_time": "5-10 min",
        "price_range": "₹₹",
    }, {
        "Burgers & Sandwiches": [("Veg Burger", "Grilled veggie patty with fresh lettuce and tomato", 90, True),
                                 ("Club Sandwich", "Triple-decker sandwich with veggies and mayo", 85, True)],
        "Beverages": [("Cold Coffee", "Iced coffee with whipped cream", 70, True)],
    }),
]

EMPLOYEES = [
    {"username": "raj.kumar", "password": "password123", "tech_park": "Manyata Tech Park",
     "company": "TechCorp Solutions", "designation": "Software Engineer",
     "employee_name": "Raj Kumar", "mobile": "9876543210"},
]


async def seed():
    """Loads the demo catalog and accounts. Safe to run more than once."""
    parks = {}
    for data in TECH_PARKS:
        park, _ = await TechPark.get_or_create(name=data["name"], defaults=data)
        parks[park.name] = park

    managers = {}
    for data in MANAGERS:
        manager, _ = await Manager.get_or_create(username=data["username"], defaults=data)
        managers[manager.username] = manager

    for data in EMPLOYEES:
        await Employee.get_or_create(username=data["username"], defaults=data)

    manyata = parks["Manyata Tech Park"]
    for manager_username, details, menu in RESTAURANTS:
        restaurant, _ = await Restaurant.get_or_create(
            name=details["name"],
            defaults={**details, "tech_park": manyata, "manager": managers.get(manager_username)},
        )
        for order, (category_name, items) in enumerate(menu.items()):
            category, _ = await MenuCategory.get_or_create(
                restaurant=restaurant, name=category_name, defaults={"display_order": order}
            )
            for name, description, price, is_veg in items:
                await MenuItem.get_or_create(
                    restaurant=restaurant, name=name,
                    defaults={"category": category, "description": description, "price": price, "is_veg": is_veg},
                )

    log.info(f"Seeded {len(parks)} tech parks, {len(RESTAURANTS)} restaurants, {len(managers)} managers.")


async def main():
    await init_db()
    await seed()
    await close_db()

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(main())
