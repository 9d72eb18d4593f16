"""
Seed script -- populates the catalog cache and the tax table.

Run with:
    python src/seed.py

Idempotent: tax rates are inserted once, products are upserted by id so
re-running refreshes the cached copy.
"""

import logging

from sqlalchemy import text
from sqlalchemy.engine import Connection, Engine

from db import init_db, make_engine
from storefront.core.config import Config

logger = logging.getLogger(__name__)

TAX_RATES = [
    ('AL', 'Alabama', 0.04), ('AK', 'Alaska', 0.00), ('AZ', 'Arizona', 0.056),
    ('AR', 'Arkansas', 0.065), ('CA', 'California', 0.0725), ('CO', 'Colorado', 0.029),
    ('CT', 'Connecticut', 0.0635), ('DE', 'Delaware', 0.00), ('FL', 'Florida', 0.06),
    ('GA', 'Georgia', 0.04), ('HI', 'Hawaii', 0.04), ('ID', 'Idaho', 0.06),
    ('IL', 'Illinois', 0.0625), ('IN', 'Indiana', 0.07), ('IA', 'Iowa', 0.06),
    ('KS', 'Kansas', 0.065), ('KY', 'Kentucky', 0.06), ('LA', 'Louisiana', 0.0445),
    ('ME', 'Maine', 0.055), ('MD', 'Maryland', 0.06), ('MA', 'Massachusetts', 0.0625),
    ('MI', 'Michigan', 0.06), ('MN', 'Minnesota', 0.06875), ('MS', 'Mississippi', 0.07),
    ('MO', 'Missouri', 0.04225), ('MT', 'Montana', 0.00), ('NE', 'Nebraska', 0.055),
    ('NV', 'Nevada', 0.0685), ('NH', 'New Hampshire', 0.00), ('NJ', 'New Jersey', 0.06625),
    ('NM', 'New Mexico', 0.05125), ('NY', 'New York', 0.08), ('NC', 'North Carolina', 0.0475),
    ('ND', 'North Dakota', 0.05), ('OH', 'Ohio', 0.0575), ('OK', 'Oklahoma', 0.045),
    ('OR', 'Oregon', 0.00), ('PA', 'Pennsylvania', 0.06), ('RI', 'Rhode Island', 0.07),
    ('SC', 'South Carolina', 0.06), ('SD', 'South Dakota', 0.045), ('TN', 'Tennessee', 0.07),
    ('TX', 'Texas', 0.0625), ('UT', 'Utah', 0.061), ('VT', 'Vermont', 0.06),
    ('VA', 'Virginia', 0.053), ('WA', 'Washington', 0.065), ('WV', 'West Virginia', 0.06),
    ('WI', 'Wisconsin', 0.05), ('WY', 'Wyoming', 0.04), ('DC', 'District of Columbia', 0.06),
]

# (id, name, price, category, tag, description, image_url, sizes JSON, provider id)
PRODUCTS = [
    (1, "Lowkey Lunar Moth T-Shirt", 32.00, "mens", "new", "Embrace the darkness. The lunar moth moves through the night unseen, drawn to light but never consumed by it.", "https://pfy-prod-products-mockup-media.s3.us-east-2.amazonaws.com/files/2025/12/20251204172443-1f0d1361-f840-6418-b422-3e44ef610fa5.png?revision=1764869157368&s=2048", '["S","M","L","XL","2XL"]', "25350654"),
    (2, "Lowkey Hot Hand T-Shirt", 32.00, "mens", "bestseller", "When you're on fire, you don't need to announce it. The results speak.", "https://pfy-prod-products-mockup-media.s3.us-east-2.amazonaws.com/files/2025/12/20251204173523-1f0d1379-d0b0-6b38-b36f-86f8438d3c28.png?revision=1764869769766&s=2048", '["S","M","L","XL","2XL"]', "25331169"),
    (3, "Lowkey Origami Crane T-Shirt", 32.00, "mens", "", "Patience. Precision. Quiet artistry. The crane is folded one crease at a time, never rushed.", "https://pfy-prod-products-mockup-media.s3.us-east-2.amazonaws.com/files/2025/12/20251204173242-1f0d1373-cb2c-64ec-b3d2-8e012d9bf3d9.png?revision=1764869606468&s=2048", '["S","M","L","XL","2XL"]', "25330988"),
    (4, "Lowkey King Playing Card T-Shirt", 32.00, "mens", "bestseller", "Royalty isn't given. It's earned. Play your cards right and let the table figure it out.", "https://pfy-prod-products-mockup-media.s3.us-east-2.amazonaws.com/files/2025/12/20251204173638-1f0d137c-9cfc-6ab4-8378-c28b24327b5e.png?revision=1764869849520&s=2048", '["S","M","L","XL","2XL"]', "25329557"),
    (5, "Lowkey Stoic Antiquity Bust T-Shirt", 32.00, "mens", "", "Ancient wisdom for modern legends. The stoics knew: control what you can, release what you can't.", "https://pfy-prod-products-mockup-media.s3.us-east-2.amazonaws.com/files/2025/12/20251204172725-1f0d1368-03e3-662a-a1be-ea49b7904c33.png?revision=1764869301402&s=2048", '["S","M","L","XL","2XL"]', "25329194"),
    (6, "Lowkey Listen to the Beat T-Shirt", 32.00, "mens", "new", "March to your own rhythm. The ear diagram represents those who listen to their internal beat.", "https://pfy-prod-products-mockup-media.s3.us-east-2.amazonaws.com/files/2025/12/20251204173353-1f0d1376-734c-67c4-a9ef-6ebd34b82e9d.png?revision=1764869690978&s=2048", '["S","M","L","XL","2XL"]', "25325219"),
    (7, "Lowkey King Playing Card Women's T-Shirt", 32.00, "womens", "bestseller", "Queens can be kings too. Royalty isn't given. It's earned.", "https://pfy-prod-products-mockup-media.s3.us-east-2.amazonaws.com/files/2025/12/20251204171617-1f0d134f-21a3-6f70-9335-c28b24327b5e.png?revision=1764868622340&s=400", '["S","M","L","XL","2XL"]', "25352891"),
    (8, "Lowkey Lunar Moth Women's T-Shirt", 32.00, "womens", "new", "Embrace the darkness. The lunar moth moves through the night unseen.", "https://pfy-prod-products-mockup-media.s3.us-east-2.amazonaws.com/files/2025/12/20251204170419-1f0d1334-5c60-6a7a-b8dd-727b19e21130.png?revision=1764867967389&s=400", '["S","M","L","XL","2XL"]', "25353284"),
    (9, "Lowkey Origami Crane Women's T-Shirt", 32.00, "womens", "", "Patience. Precision. Quiet artistry.", "https://pfy-prod-products-mockup-media.s3.us-east-2.amazonaws.com/files/2025/12/20251204165240-1f0d131a-5617-6e1c-95db-6a7a3312108b.png?revision=1764867283522&s=400", '["S","M","L","XL","2XL"]', "25353179"),
    (10, "Lowkey Stoic Antiquity Bust Women's T-Shirt", 32.00, "womens", "", "Ancient wisdom for modern legends.", "https://pfy-prod-products-mockup-media.s3.us-east-2.amazonaws.com/files/2025/12/20251204171734-1f0d1351-f921-6892-957b-86f8438d3c28.png?revision=1764868698827&s=400", '["S","M","L","XL","2XL"]', "25353088"),
    (11, "Lowkey Listen to the Beat Women's T-Shirt", 32.00, "womens", "", "March to your own rhythm.", "https://pfy-prod-products-mockup-media.s3.us-east-2.amazonaws.com/files/2025/12/20251204171959-1f0d1357-6575-6796-8fbb-e27225756f85.png?revision=1764868844522&s=400", '["S","M","L","XL","2XL"]', "25352744"),
    (12, "Lowkey Hot Hand Women's T-Shirt", 32.00, "womens", "", "When you're on fire, you don't need to announce it.", "https://pfy-prod-products-mockup-media.s3.us-east-2.amazonaws.com/files/2025/12/20251204171321-1f0d1348-8d22-6744-b178-6ebd34b82e9d.png?revision=1764868462423&s=400", '["S","M","L","XL","2XL"]', "25352574"),
    (13, "Lowkey Lady Cropped Top Tee", 32.00, "womens", "exclusive", "Women's exclusive design. Feminine power, quiet confidence.", "https://pfy-prod-products-mockup-media.s3.us-east-2.amazonaws.com/files/2025/12/20251204192322-1f0d146b-2950-649a-9a3a-0a1ce80947fd.png?revision=1764876247939&s=400", '["S","M","L","XL"]', "25347945"),
    (14, "Lowkey Legends Insulated Tumbler", 36.00, "accessories", "new", "20oz stainless steel insulated travel cup. For the 3AM grinders who need their fuel.", "https://images-api.printify.com/mockup/692e2bb8a0b81ff6220f8075/78458/41628/lowkey-legends-insulated-20oz-tumbler-stainless-travel-cup.jpg?camera_label=front&revision=1764727722216&s=400", '["20oz"]', "25324445"),
]


def seed_tax_rates(conn: Connection) -> None:
    for code, name, rate in TAX_RATES:
        conn.execute(
            text(
                "INSERT INTO tax_rates (state_code, state_name, rate) "
                "VALUES (:code, :name, :rate) "
                "ON CONFLICT (state_code) DO NOTHING"
            ),
            {"code": code, "name": name, "rate": rate},
        )
    logger.info(f"Tax rates seeded ({len(TAX_RATES)} regions)")


def seed_products(conn: Connection) -> None:
    for row in PRODUCTS:
        product_id, name, price, category, tag, description, image_url, sizes, printify_id = row
        conn.execute(
            text(
                "INSERT INTO products "
                "(id, name, price, category, tag, description, image_url, sizes, printify_id) "
                "VALUES (:id, :name, :price, :category, :tag, :description, :image_url, :sizes, :printify_id) "
                "ON CONFLICT (id) DO UPDATE SET "
                "name = excluded.name, price = excluded.price, category = excluded.category, "
                "tag = excluded.tag, description = excluded.description, "
                "image_url = excluded.image_url, sizes = excluded.sizes, "
                "printify_id = excluded.printify_id"
            ),
            {
                "id": product_id,
                "name": name,
                "price": price,
                "category": category,
                "tag": tag,
                "description": description,
                "image_url": image_url,
                "sizes": sizes,
                "printify_id": printify_id,
            },
        )
    logger.info(f"Products seeded ({len(PRODUCTS)} items)")


def seed(engine: Engine) -> None:
    init_db(engine)
    with engine.begin() as conn:
        seed_tax_rates(conn)
        seed_products(conn)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s")
    config = Config.from_env()
    seed(make_engine(config.database.url))
    print("Seed complete.")
