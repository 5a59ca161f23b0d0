HEALTH_STATUSES = ("healthy", "monitoring", "sick")

# key under which the session id is kept in the signed cookie
SESSION_KEY = "sid"
