"""
API Blueprint - JSON endpoints
Handles: Contact message intake
"""

from flask import Blueprint

api_bp = Blueprint('api', __name__, url_prefix='/api')

from . import routes
