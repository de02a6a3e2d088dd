"""
Portfolio Blueprint - Public single-page portfolio
Handles: Hero, about, skills, experience, education, projects and contact sections
"""

from flask import Blueprint

portfolio_bp = Blueprint('portfolio', __name__, url_prefix='')

from . import routes
