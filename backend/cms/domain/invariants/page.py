from cms.domain.content.builder import validate_builder_content
from cms.domain.exceptions import InvalidContent

def assert_page_content(content):
    """
    Strict write-time check of a builder content envelope.
    Returns the validated envelope.
    """
    if content is None:
        raise InvalidContent("Content is required")

    result = validate_builder_content(content)
    if not result.valid:
        raise InvalidContent(result.error)

    return result.content
