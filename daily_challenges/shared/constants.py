"""Constantes partagées pour l'application."""

# Statuts d'un challenge (valeurs canoniques persistées)
STATUS_ACTIVE = "active"
STATUS_COMPLETED = "completed"
STATUS_ABANDONED = "abandoned"
CHALLENGE_STATUSES = (STATUS_ACTIVE, STATUS_COMPLETED, STATUS_ABANDONED)

# Valeur spéciale du filtre par statut
STATUS_FILTER_ALL = "all"

# Précision des pourcentages
SUCCESS_PERCENT_DECIMALS = 1  # taux de réussite (jours accomplis / jours jugés)
GOAL_PERCENT_DECIMALS = 2  # avancement vers l'objectif (jours accomplis / durée)

# Bornes de saisie
NAME_MAX_LENGTH = 200
NOTE_MAX_LENGTH = 2000
MAX_DURATION_DAYS = 36_500  # ~100 ans, garde la date de fin dans le calendrier
