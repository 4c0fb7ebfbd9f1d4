def build_replacements(raw):
    """
    Build the title rewrite map from `src1=dst1;src2=dst2`.

    Pairs missing either side are ignored. When a source title is listed
    twice, the first pair wins.
    """
    replacements = {}

    if not raw:
        return replacements

    for pair in raw.split(';'):
        source, _, replacement = pair.partition('=')

        if not source or not replacement:
            continue

        replacements.setdefault(source, replacement)

    return replacements


def resolve(title, replacements):
    return (replacements.get(title) if replacements else None) or title
