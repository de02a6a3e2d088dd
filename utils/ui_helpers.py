"""
UI Helper Functions - Navigation and page metadata for the portfolio template
"""

from typing import Dict, List


NAV_SECTIONS = [
    ('home', 'Home'),
    ('about', 'About'),
    ('skills', 'Skills'),
    ('experience', 'Experience'),
    ('education', 'Education'),
    ('portfolio', 'Portfolio'),
    ('contact', 'Contact'),
]


def get_nav_sections() -> List[Dict[str, str]]:
    """
    Navigation entries, one per page section

    Returns:
        list: [{'id': 'home', 'label': 'Home', 'href': '#home'}, ...]
    """
    return [{'id': sid, 'label': label, 'href': f'#{sid}'} for sid, label in NAV_SECTIONS]


def get_page_meta(data: Dict) -> Dict[str, str]:
    """SEO meta tags derived from the portfolio content"""
    name = data.get('name', '')
    title = data.get('title', '')
    return {
        'title': f'{name} | {title}' if name and title else name or title or 'Portfolio',
        'description': data.get('description', ''),
        'keywords': ', '.join(s.get('name', '') for s in data.get('skills', [])),
    }


__all__ = ['NAV_SECTIONS', 'get_nav_sections', 'get_page_meta']
