"""Text rendering of validation results via kida.

Terminal output, so autoescape is off.
"""

from kida import Environment

from loginform.validation import Invalid, ValidationResult

RESULT_TEMPLATE = (
    "{% if valid %}"
    "E-Mail: {{ email_address }}\nPassword: {{ password }}"
    "{% else %}"
    "{{ label }}: {{ message }}"
    "{% end %}"
)


def create_environment() -> Environment:
    """Create a kida Environment for plain-text output."""
    return Environment(autoescape=False)


def result_context(result: ValidationResult) -> dict[str, object]:
    """Flatten *result* into template context."""
    if isinstance(result, Invalid):
        return {
            "valid": False,
            "field": result.field.value,
            "label": result.field.label,
            "message": result.message,
        }
    return {
        "valid": True,
        "email_address": result.email_address,
        "password": result.password,
    }


def render_result(result: ValidationResult, env: Environment | None = None) -> str:
    """Render *result* as text: ``"<label>: <message>"`` or the echoed values."""
    env = env or create_environment()
    tmpl = env.from_string(RESULT_TEMPLATE)
    return tmpl.render(result_context(result))
