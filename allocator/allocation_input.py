from dataclasses import dataclass


@dataclass(frozen=True)
class AllocationInput:
    """
    One respondent's intake answers, already normalised.

    Categorical fields hold the raw answer string (bracket codes such as
    ``"A"``..``"F"`` or labels such as ``"Very stable"``).  Values the rules
    do not recognise simply trigger no rule.  Scores are on a 0-10 scale and
    default to 0 when the respondent left them blank.
    """

    # Financial situation
    income_range: str = ""
    essentials_range: str = ""
    debt_load: str = ""
    interest_level: str = ""
    emergency_fund: str = ""
    income_stability: str = ""

    # Goals / context
    priority: str = ""
    goal_timeline: str = ""
    dependents: str = ""
    stage_of_life: str = ""

    # 0-10 self-report scores
    satisfaction: float = 0
    discipline: float = 0
    impulse: float = 0
    long_term: float = 0
    emotion_spend: float = 0
    emotion_safety: float = 0
    avoidance: float = 0
    lifestyle: float = 0
    growth: float = 0
    stability: float = 0
    autonomy: float = 0
    literacy_level: float = 0
