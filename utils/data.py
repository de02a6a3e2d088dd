"""
Data Management Module - Portfolio page content
Built-in content with an optional JSON file override
"""

import copy
import json
import os
from flask import current_app


DEFAULT_PORTFOLIO = {
    'name': 'Rohit Yadav',
    'title': 'Full Stack Developer',
    'description': (
        'Passionate developer with 6 months of experience building modern web applications. '
        'Specializing in React, Node.js, and full-stack development with a focus on creating '
        'exceptional user experiences.'
    ),
    'photo': '',
    'about': {
        'intro': 'A dedicated developer passionate about creating innovative solutions '
                 'and continuously learning new technologies.',
        'journey': [
            "Currently pursuing B.Tech from Babu Banarasi Das University, Lucknow, I've gained "
            "valuable industry experience working at alka.tech Pvt.Ltd. My educational foundation "
            "from Ayodhya, combined with hands-on development experience, has shaped me into a "
            "well-rounded developer.",
            "I specialize in full-stack development with expertise in modern web technologies. "
            "My goal is to create efficient, scalable, and user-friendly applications that solve "
            "real-world problems.",
        ],
        'facts': ['Lucknow, India', 'B.Tech Student', '6 Months Experience'],
        'stats': [
            {'value': '6+', 'label': 'Months Experience'},
            {'value': '8+', 'label': 'Technologies'},
            {'value': '10+', 'label': 'Projects Built'},
            {'value': '100%', 'label': 'Dedication'},
        ],
    },
    'skill_groups': [
        {'name': 'Frontend', 'skills': ['HTML5', 'CSS3', 'JavaScript', 'React']},
        {'name': 'Backend', 'skills': ['Node.js', 'Next.js', 'Django']},
        {'name': 'Database', 'skills': ['MongoDB']},
    ],
    'skills': [
        {'name': 'JavaScript', 'level': 85},
        {'name': 'React', 'level': 80},
        {'name': 'Node.js', 'level': 75},
        {'name': 'Next.js', 'level': 70},
        {'name': 'HTML/CSS', 'level': 90},
        {'name': 'MongoDB', 'level': 75},
        {'name': 'Django', 'level': 65},
    ],
    'experience': [
        {
            'role': 'Software Developer',
            'period': '6 Months',
            'company': 'alka.tech Pvt.Ltd.',
            'description': 'Gained hands-on experience in full-stack web development, working with '
                           'modern technologies and contributing to various client projects. Developed '
                           'proficiency in React, Node.js, and database management while collaborating '
                           'with experienced developers.',
            'technologies': ['React', 'Node.js', 'JavaScript', 'MongoDB'],
        },
        {
            'role': 'Current Status',
            'period': 'Present',
            'company': 'Actively Seeking Opportunities',
            'description': 'Currently pursuing B.Tech and looking for new opportunities to apply my '
                           'skills and continue growing as a developer. Open to full-time positions, '
                           'internships, and freelance projects.',
            'technologies': [],
        },
    ],
    'education': [
        {
            'degree': 'Bachelor of Technology',
            'period': 'Currently Pursuing',
            'institution': 'Babu Banarasi Das University',
            'location': 'Lucknow, Uttar Pradesh',
            'status': 'In Progress',
            'description': 'Pursuing a comprehensive computer science curriculum with focus on '
                           'software engineering, data structures, algorithms, and modern web technologies.',
        },
        {
            'degree': 'School Education',
            'period': 'Completed',
            'institution': 'School in Ayodhya',
            'location': 'Ayodhya, Uttar Pradesh',
            'status': 'Completed',
            'description': 'Completed foundational education with strong academic performance, '
                           'developing critical thinking and problem-solving skills that form the basis '
                           'of my technical abilities.',
        },
    ],
    'projects': [
        {
            'title': 'React Web App',
            'description': 'Modern web application built with React and Node.js featuring user '
                           'authentication and real-time data.',
            'tags': ['React', 'Node.js', 'MongoDB'],
        },
        {
            'title': 'Next.js Project',
            'description': 'Full-stack application using Next.js with server-side rendering and '
                           'optimized performance.',
            'tags': ['Next.js', 'JavaScript', 'CSS'],
        },
        {
            'title': 'Django Backend',
            'description': 'RESTful API backend service built with Django, featuring authentication '
                           'and data management.',
            'tags': ['Django', 'Python', 'REST API'],
        },
    ],
    'contact': {
        'email': 'cse4096@gmail.com',
        'phone': '+91 9565314883',
        'location': 'Lucknow, Uttar Pradesh, India',
    },
    'social': {
        'linkedin': 'https://www.linkedin.com/in/rohit-yadav-46390a245/',
        'github': 'https://github.com/ry538663',
        'twitter': 'https://x.com/Rohitya44743290',
    },
}


def get_default_portfolio_data():
    """Return a fresh copy of the built-in portfolio content"""
    return copy.deepcopy(DEFAULT_PORTFOLIO)


def load_data_from_json(path):
    """Load content overrides from a JSON file"""
    try:
        with open(path, 'r', encoding='utf-8') as file:
            data = json.load(file)
        if not isinstance(data, dict):
            current_app.logger.error(f"Portfolio data file {path} does not contain an object")
            return {}
        return data
    except (FileNotFoundError, json.JSONDecodeError) as e:
        current_app.logger.error(f"Error loading portfolio data from {path}: {str(e)}")
        return {}


def load_data():
    """
    Load portfolio page content

    Top-level keys in PORTFOLIO_DATA_FILE replace the built-in ones;
    a missing or broken file falls back to the built-in content.

    Returns:
        dict: Portfolio content for the page template
    """
    data = get_default_portfolio_data()
    path = current_app.config.get('PORTFOLIO_DATA_FILE')
    if path and os.path.exists(path):
        data.update(load_data_from_json(path))
        current_app.logger.debug(f"Loaded portfolio data overrides from {path}")
    return data


__all__ = [
    'DEFAULT_PORTFOLIO',
    'get_default_portfolio_data',
    'load_data_from_json',
    'load_data'
]
