"""Mi Descanso package.

Team vacation requests and shared calendar, organized by feature modules
(users, vacations, extra_days, team_calendar) with a thin Flask controller
layer over service/repository layers.
"""
