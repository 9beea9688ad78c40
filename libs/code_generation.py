"""Helpers that replace temporary model codes with their final, id-based value."""

from django.db.models.signals import post_save


def generate_model_code(instance) -> str:
    """Build ``{CODE_PREFIX}{id}`` with the id zero-padded to at least 3 digits.

    Example:
        Department(id=7)    -> "PB007"
        Department(id=1234) -> "PB1234"
    """
    prefix = getattr(instance.__class__, "CODE_PREFIX", None)
    if prefix is None:
        raise AttributeError(f"{instance.__class__.__name__} must have a CODE_PREFIX class attribute")

    if getattr(instance, "id", None) is None:
        raise ValueError("Instance must have an id to generate code")

    return f"{prefix}{instance.id:03d}"


def create_auto_code_signal_handler(temp_code_prefix: str, custom_generate_code=None):
    """Return a ``post_save`` receiver that finalises temporary codes.

    The receiver only acts on freshly created rows whose ``code`` still starts
    with ``temp_code_prefix``. ``custom_generate_code(instance)`` may return the
    code to store; when it returns ``None`` it is assumed to have saved the
    instance itself.
    """

    def signal_handler(sender, instance, created, **kwargs):
        code = getattr(instance, "code", None)
        if not created or not code or not code.startswith(temp_code_prefix):
            return

        if custom_generate_code:
            new_code = custom_generate_code(instance)
            if new_code is None:
                return
        else:
            new_code = generate_model_code(instance)

        instance.code = new_code
        # queryset update leaves updated_at equal to created_at on the new row
        sender._default_manager.filter(pk=instance.pk).update(code=new_code)

    return signal_handler


def register_auto_code_signal(*models, temp_code_prefix: str = "TEMP_", custom_generate_code=None):
    """Connect one auto-code handler to ``post_save`` for each model given.

    Example:
        register_auto_code_signal(Department, Employee, temp_code_prefix="TEMP_")
    """
    handler = create_auto_code_signal_handler(temp_code_prefix, custom_generate_code=custom_generate_code)

    for model in models:
        post_save.connect(handler, sender=model, weak=False)
