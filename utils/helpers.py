"""
Helpers Module - Small formatting utilities shared by views and notifications
"""

# Badge colours for technology tags on project cards
TAG_CLASSES = {
    'React': 'tag-blue',
    'Node.js': 'tag-green',
    'MongoDB': 'tag-purple',
    'Next.js': 'tag-gray',
    'JavaScript': 'tag-yellow',
    'CSS': 'tag-blue',
    'Django': 'tag-green',
    'Python': 'tag-blue',
}
DEFAULT_TAG_CLASS = 'tag-red'


def tag_class(tag):
    """Jinja filter: CSS class for a technology tag"""
    return TAG_CLASSES.get(tag, DEFAULT_TAG_CLASS)


def truncate_text(text, limit):
    """Cut text to limit characters, marking the cut with an ellipsis"""
    if not text:
        return ''
    if len(text) <= limit:
        return text
    return f"{text[:limit]}..."


def clip(value, limit):
    """Hard length cap for values going into fixed-size columns"""
    return (value or '')[:limit]


__all__ = [
    'tag_class',
    'truncate_text',
    'clip'
]
