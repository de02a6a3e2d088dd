"""
Portfolio Routes - Public portfolio views
"""

from flask import render_template, redirect, url_for
from utils.data import load_data
from utils.ui_helpers import get_page_meta
from utils.decorators import pop_form_input
from . import portfolio_bp


@portfolio_bp.route('/')
def index():
    """Single-page portfolio with the contact form"""
    data = load_data()
    return render_template('index.html',
                           data=data,
                           meta=get_page_meta(data),
                           form=pop_form_input())


@portfolio_bp.route('/portfolio')
def portfolio_alias():
    """Alias for index"""
    return redirect(url_for('portfolio.index', _anchor='portfolio'))
