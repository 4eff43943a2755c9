import logging
import os

from dotenv import load_dotenv
from flask import Flask, g
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException

from database import db

load_dotenv()


def load_settings(environ=os.environ):
    """Read the service settings from the environment."""
    return {
        "SQLALCHEMY_DATABASE_URI": environ.get("DATABASE_URL", "sqlite:///db.sqlite3"),
        "PORT": int(environ.get("PORT", "3000")),
        "HOST": environ.get("HOST", "127.0.0.1"),
    }


# Initialize Flask app
app = Flask(__name__)
app.config.update(load_settings())

db.init_app(app)

# Models import should be after initializing db
from models.project import Project
from models.report import Report

from services.store import Store
from routes import json_error
from routes.projects import projects_bp
from routes.reports import reports_bp

app.register_blueprint(projects_bp)
app.register_blueprint(reports_bp)


def init_database():
    """Create the projects and reports tables when they do not exist yet."""
    with app.app_context():
        db.create_all()


init_database()


# Store
# ------------------------------
@app.before_request
def load_store():
    """Bind a Store on the request's database session to g.store."""
    g.store = Store(db.session)


# Errors
# ------------------------------
@app.errorhandler(SQLAlchemyError)
def handle_database_error(error):
    db.session.rollback()
    logging.error("Database error while handling request: %s", error, exc_info=True)
    return json_error("Internal server error", status=500)


@app.errorhandler(HTTPException)
def handle_http_error(error):
    return json_error(error.description or error.name, status=error.code or 500)


# Application Execution
# ------------------------------
if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    port = app.config["PORT"]
    logging.info("Server listening on port %s", port)
    app.run(host=app.config["HOST"], port=port)
