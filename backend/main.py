import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError

from backend.core import config
from backend.core.exceptions import register_exception_handlers
from backend.database import init_database
from backend.routes import auth_routes, cart_routes, class_routes, payment_routes, report_routes, user_routes

app = FastAPI(title='Camp School API')

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=['*'],
    allow_headers=['*'],
)

register_exception_handlers(app)

logger = logging.getLogger(__name__)


@app.on_event('startup')
def initialize_database() -> None:
    config.validate_runtime_config()
    try:
        init_database()
    except SQLAlchemyError:
        logger.exception('Database initialization failed. Check DATABASE_URL and database credentials.')
        raise
    logger.info('Connected to the database; Camp School API is ready.')


@app.get('/')
def root():
    return {'status': 'Server Api is running'}


app.include_router(auth_routes.router)
app.include_router(user_routes.router, prefix='/api')
app.include_router(class_routes.router, prefix='/api')
app.include_router(cart_routes.router, prefix='/api')
app.include_router(payment_routes.router)
app.include_router(report_routes.router)
