HELP_TEXT = "^C:Quit ^F:Find ^S:Search M-g:Jump M-<:Start M->:End ?:Help"


def render_status(context, width):
    """
    context keys: current, unicode_version
    """
    left = HELP_TEXT
    right = ""
    current = context.get('current')
    if current is not None:
        right = f"U+{current:04X}"
    version = context.get('unicode_version')
    if version:
        right = f"{right}  Unicode {version}".strip()

    if right and len(left) + len(right) + 2 <= width:
        text = left + right.rjust(width - len(left) - 1) + " "
    else:
        text = left

    return text.ljust(width)[:width]
