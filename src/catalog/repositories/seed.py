# src/catalog/repositories/seed.py
from catalog.domain.models import Product

# Initial catalog loaded at startup when SEED_CATALOG is enabled
SEED_PRODUCTS: tuple[Product, ...] = (
    Product(
        id=1,
        name="Smart Thermostat",
        price=199.99,
        description=(
            "A smart thermostat allows you to remotely control and schedule your home's "
            "heating and cooling systems through a smartphone app. It can also learn your "
            "preferences and adjust the temperature accordingly."
        ),
        image="https://www.bhphotovideo.com/images/images2500x2500/google_ga02082_us_nest_thermostat_sand_1597181.jpg",
    ),
    Product(
        id=2,
        name="Connected Fitness Tracker",
        price=169.99,
        description=(
            "A connected fitness tracker measures your physical activity, heart rate, and "
            "sleep patterns. It syncs with your smartphone to provide real-time health and "
            "fitness data and insights."
        ),
        image="https://p.globalsources.com/IMAGES/PDT/B5696870693/Smart-Bracelet.jpg",
    ),
    Product(
        id=3,
        name="Smart Doorbell",
        price=129.99,
        description=(
            "This IoT gadget includes a camera and intercom system, enabling you to see and "
            "communicate with visitors at your front door through a mobile app, even when "
            "you're not at home."
        ),
        image="https://m.media-amazon.com/images/I/71aSgA2f7-S._AC_UF894,1000_QL80_.jpg",
    ),
    Product(
        id=4,
        name="Wireless Smart Lighting",
        price=118.99,
        description=(
            "These smart light bulbs and switches can be controlled remotely, dimmed, and "
            "scheduled using a smartphone app. Some models can change colors and sync with "
            "music or your TV."
        ),
        image="https://qa1aerocartnet.s3.eu-central-1.amazonaws.com/uploads/fashion_store_staging/categories/Smart%20Lights_20221009910B7.jpg",
    ),
    Product(
        id=5,
        name="Smart Lock",
        price=256.99,
        description=(
            "A smart lock provides keyless entry to your home using a mobile app or even "
            "voice commands. It offers enhanced security features, including guest access "
            "control."
        ),
        image="https://images.thdstatic.com/productImages/8a7aec4e-3740-40b3-a461-be81be7e1928/svn/ultraloq-electronic-locksets-ubpbhb-64_600.jpg",
    ),
    Product(
        id=6,
        name="IOT Pet Feeder",
        price=140.99,
        description=(
            "This device lets you feed your pets remotely and on a schedule, ensuring your "
            "furry friends are well-fed even when you're away from home."
        ),
        image="https://media.karousell.com/media/photos/products/2020/11/16/automatic_pet_feeder_battery___1605488144_b9fcf149.jpg",
    ),
    Product(
        id=7,
        name="Smart Garden Sensors",
        price=19.99,
        description=(
            "IoT garden sensors monitor soil moisture, light levels, and temperature, sending "
            "real-time data to your phone. They help you optimize plant care and conserve water."
        ),
        image="https://www.deliacreates.com/wp-content/uploads/2015/07/Edyn-30-of-510717.jpg",
    ),
    Product(
        id=8,
        name="IoT Coffee Maker",
        price=507.99,
        description=(
            "This smart coffee maker can be programmed to brew your favorite coffee remotely "
            "through a smartphone app. You can even adjust the strength and brewing time."
        ),
        image="https://media.techeblog.com/images/smarter-coffee.jpg",
    ),
    Product(
        id=9,
        name="Conected baby monitor",
        price=53.99,
        description=(
            "A connected baby monitor offers video and audio streaming to your smartphone, "
            "providing peace of mind by keeping an eye on your baby, even from another room "
            "or location."
        ),
        image="https://www.clement.ca/media/catalog/product/H/U/HUB-HCSNPCL2-CA_A.jpg",
    ),
    Product(
        id=10,
        name="Smart Refrigerator",
        price=1505.99,
        description=(
            "This IoT gadget features a touchscreen display on the door, allowing you to check "
            "the contents, create shopping lists, and even order groceries online. It can also "
            "suggest recipes based on available ingredients."
        ),
        image="https://media.betterlifeuae.com/catalog/product/r/q/rq759n4ibu1-b.jpg",
    ),
)
