import logging

log = logging.getLogger()
log.setLevel(logging.INFO)
