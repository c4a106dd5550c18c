"""
Package: cronbot

Discord chat bot with a `%cron` job scheduler.
"""
