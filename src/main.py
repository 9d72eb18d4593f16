import logging
from typing import Optional

from flask import Flask, jsonify, request
from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException

from db import init_db, make_engine
from routes import addresses_bp, cart_bp, marketing_bp, orders_bp, products_bp, tax_bp
from storefront.core.config import Config
from storefront.core.dependencies import ServiceContainer
from storefront.core.exceptions import BaseAPIException, InternalServerError
from storefront.repositories.address_repository import AddressRepository
from storefront.repositories.cart_repository import CartRepository
from storefront.repositories.marketing_repository import MarketingRepository
from storefront.repositories.order_repository import OrderRepository
from storefront.repositories.product_repository import ProductRepository
from storefront.repositories.tax_repository import TaxRepository
from storefront.repositories.user_repository import UserRepository
from storefront.services.address_service import AddressService
from storefront.services.cart_service import CartService
from storefront.services.catalog_gateway import CatalogGateway
from storefront.services.marketing_service import MarketingService
from storefront.services.order_service import FulfillmentService, OrderService
from storefront.services.product_service import ProductService
from storefront.services.tax_service import TaxService
from storefront.utils.date_utils import DateUtils

LOG_FORMAT = "%(asctime)s  %(levelname)-8s  %(name)s  %(message)s"

logger = logging.getLogger(__name__)


def build_container(engine: Engine, catalog: CatalogGateway) -> ServiceContainer:
    """Wire repositories and services around one engine and one provider client."""
    container = ServiceContainer()

    container.provide(Engine, engine)
    container.provide(CatalogGateway, catalog)
    container.provide(UserRepository, UserRepository(engine))
    container.provide(ProductRepository, ProductRepository(engine))
    container.provide(OrderRepository, OrderRepository(engine))

    container.provide_lazy(ProductService, lambda c: ProductService(c.get(ProductRepository), c.get(CatalogGateway)))
    container.provide_lazy(TaxService, lambda c: TaxService(TaxRepository(c.get(Engine))))
    container.provide_lazy(AddressService, lambda c: AddressService(AddressRepository(c.get(Engine))))
    container.provide_lazy(CartService, lambda c: CartService(CartRepository(c.get(Engine))))
    container.provide_lazy(MarketingService, lambda c: MarketingService(MarketingRepository(c.get(Engine))))
    container.provide_lazy(OrderService, lambda c: OrderService(c.get(OrderRepository)))
    container.provide_lazy(
        FulfillmentService,
        lambda c: FulfillmentService(c.get(OrderService), c.get(ProductRepository), c.get(CatalogGateway)),
    )
    return container


def create_app(
    config: Optional[Config] = None,
    engine: Optional[Engine] = None,
    catalog: Optional[CatalogGateway] = None,
) -> Flask:
    """
    Application factory.

    Tests pass their own engine and a fake catalog; each app gets its own
    container, so two apps never share a store.
    """
    config = config or Config.from_env()
    config.validate()

    logging.basicConfig(level=config.app.log_level.upper(), format=LOG_FORMAT)

    if engine is None:
        engine = make_engine(config.database.url, echo=config.database.echo)
    init_db(engine)

    if catalog is None:
        catalog = CatalogGateway(config.catalog)

    app = Flask(__name__)
    app.config["MAX_CONTENT_LENGTH"] = config.app.max_content_length
    app.config["STOREFRONT"] = config
    app.extensions["container"] = build_container(engine, catalog)

    # ------------------------------------------------------------------ #
    # Blueprints                                                           #
    # ------------------------------------------------------------------ #
    app.register_blueprint(products_bp,  url_prefix="/api/products")
    app.register_blueprint(tax_bp,       url_prefix="/api/tax")
    app.register_blueprint(orders_bp,    url_prefix="/api/orders")
    app.register_blueprint(addresses_bp, url_prefix="/api/addresses")
    app.register_blueprint(cart_bp,      url_prefix="/api/cart")
    app.register_blueprint(marketing_bp, url_prefix="/api/marketing")

    # ------------------------------------------------------------------ #
    # Error handlers: every failure leaves as the JSON envelope            #
    # ------------------------------------------------------------------ #
    @app.errorhandler(BaseAPIException)
    def api_error(e: BaseAPIException):
        if e.status_code >= 500:
            logger.error(f"{e.error_code}: {e.internal_message}")
        return jsonify(e.to_dict()), e.status_code

    @app.errorhandler(HTTPException)
    def http_error(e: HTTPException):
        return jsonify({"success": False, "error": str(e.description)}), e.code

    @app.errorhandler(SQLAlchemyError)
    def db_error(e):
        logger.error(f"Unhandled database error: {e}")
        return jsonify({"success": False, "error": "A database error occurred."}), 500

    @app.errorhandler(Exception)
    def internal_error(e):
        logger.exception(f"Unhandled error: {e}")
        error = InternalServerError(str(e))
        return jsonify(error.to_dict()), error.status_code

    # ------------------------------------------------------------------ #
    # CORS and security headers                                            #
    # ------------------------------------------------------------------ #
    allowed_origins = config.app.cors_origins or ["*"]

    @app.after_request
    def add_headers(response):
        if "*" in allowed_origins:
            response.headers["Access-Control-Allow-Origin"] = "*"
        else:
            origin = request.headers.get("Origin")
            if origin in allowed_origins:
                response.headers["Access-Control-Allow-Origin"] = origin
                response.headers["Vary"] = "Origin"
        response.headers["Access-Control-Allow-Methods"] = "GET, POST, PATCH, DELETE, OPTIONS"
        response.headers["Access-Control-Allow-Headers"] = "Content-Type, X-User-Id, X-Session-Id"
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "SAMEORIGIN"
        response.headers["Referrer-Policy"] = "no-referrer"
        return response

    # ------------------------------------------------------------------ #
    # Health check                                                         #
    # ------------------------------------------------------------------ #
    @app.get("/health")
    def health():
        """Liveness + readiness probe. Returns 503 if DB is unreachable."""
        try:
            with engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return jsonify({
                "status": "ok",
                "database": "reachable",
                "timestamp": DateUtils.now_utc().isoformat(),
            }), 200
        except SQLAlchemyError as exc:
            logger.error(f"Health check failed: {exc}")
            return jsonify({"status": "error", "database": "unreachable"}), 503

    logger.info(f"Storefront app created ({config.app.environment})")
    return app


if __name__ == "__main__":
    settings = Config.from_env()
    application = create_app(settings)
    application.run(debug=settings.app.debug, host=settings.app.host, port=settings.app.port)
