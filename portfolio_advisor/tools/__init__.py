# Re-export advice tools so `from portfolio_advisor import tools; tools.growth...` works.
from . import life_events  # free-text milestones
from . import compliance
from . import feature_ranker
from . import narrative
from . import insurance
from . import growth
from . import risk_return
