identity = 'http://hostos.invalid/project/python/hostos.time'
name = 'hostos-time'
abstract = 'Calendar records, time construction, and adaptive time formatting for script hosts.'
icon = '⌚'
study = 'horology'

version_info = (0, 1, 0)
version = '.'.join(map(str, version_info))
