def plural(count: int, word: str):
    if count == 1:
        return word
    if word.endswith(('s', 'ch', 'sh', 'x')):
        return word + 'es'
    return word + 's'


def combine_list_and(entries: list):
    if len(entries) == 0:
        return 'None'
    if len(entries) == 1:
        return entries[0]
    elif len(entries) == 2:
        return entries[0] + ' and ' + entries[1]
    return ', '.join(entries[:-1]) + ', and ' + entries[-1]


def counted(count: int, word: str):
    return '{0} {1}'.format(count, plural(count, word))
