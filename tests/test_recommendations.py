from feasibility.models.record import AssessmentRecord
from feasibility.models.results import SubScores
from feasibility.models.types import Complexity, Rating, SizeClass
from feasibility.scoring.recommendations import TIER_RECOMMENDATIONS, assess, rating_for


def subs(**overrides):
    values = dict(
        strategic_alignment=80,
        organizational_readiness=80,
        delivery_capacity=80,
        technology_fit=80,
        governance=80,
        risk_profile=80,
    )
    values.update(overrides)
    return SubScores(**values)


def test_rating_thresholds():
    assert rating_for(100) == Rating.GREEN
    assert rating_for(75) == Rating.GREEN
    assert rating_for(74) == Rating.AMBER
    assert rating_for(50) == Rating.AMBER
    assert rating_for(49) == Rating.RED
    assert rating_for(0) == Rating.RED


def test_rating_labels():
    assert Rating.GREEN.display == "GREEN - LIKELY TO SUCCEED"
    assert Rating.AMBER.display == "AMBER - CONDITIONAL SUCCESS"
    assert Rating.RED.display == "RED - HIGH RISK"


def test_each_tier_has_five_recommendations():
    for rating in Rating:
        assert len(TIER_RECOMMENDATIONS[rating]) == 5

    out = assess(80, subs(), AssessmentRecord())
    assert out.recommendations[0] == "Proceed with initiative planning and resource allocation"
    out = assess(40, subs(), AssessmentRecord())
    assert out.recommendations[0] == "Significant concerns identified - reconsider initiative"


def test_no_risks_for_strong_scores():
    assert assess(80, subs(), AssessmentRecord()).risks == []


def test_weak_sub_scores_in_fixed_order():
    out = assess(
        40,
        subs(
            strategic_alignment=40,
            organizational_readiness=59,
            delivery_capacity=60,
            technology_fit=20,
            governance=0,
            risk_profile=55,
        ),
        AssessmentRecord(),
    )
    assert out.risks == [
        "Poor strategic alignment",
        "Organization not ready for change",
        "Technology compatibility issues",
        "Weak governance structure",
        "High barrier-to-enabler ratio",
    ]


def test_large_initiative_readiness_concern():
    record = AssessmentRecord(size=SizeClass.LARGE)
    out = assess(70, subs(organizational_readiness=67), record)
    assert out.risks == ["Large initiative with organizational readiness concerns"]

    record.size = SizeClass.MEDIUM
    assert assess(70, subs(organizational_readiness=67), record).risks == []


def test_high_complexity_concern():
    record = AssessmentRecord(technical_complexity=Complexity.HIGH)
    out = assess(70, subs(technology_fit=60), record)
    assert out.risks == ["High technical complexity with system compatibility issues"]
    assert assess(70, subs(technology_fit=70), record).risks == []


def test_more_barriers_than_enablers():
    record = AssessmentRecord()
    record.add_barrier(impact=1)
    record.add_barrier(impact=1)
    record.add_enabler(impact=5)
    out = assess(70, subs(), record)
    assert out.risks[-1] == "More barriers than enablers identified"


def test_barrier_count_risk_absent_when_enablers_keep_up():
    record = AssessmentRecord()
    assert "More barriers than enablers identified" not in assess(70, subs(), record).risks
    record.add_barrier(impact=5)
    record.add_enabler(impact=1)
    assert "More barriers than enablers identified" not in assess(70, subs(), record).risks


def test_all_nine_risks_in_order():
    record = AssessmentRecord(size=SizeClass.LARGE, technical_complexity=Complexity.HIGH)
    record.add_barrier()
    low = subs(
        strategic_alignment=20,
        organizational_readiness=20,
        delivery_capacity=20,
        technology_fit=20,
        governance=20,
        risk_profile=20,
    )
    out = assess(20, low, record)
    assert out.rating == Rating.RED
    assert len(out.risks) == 9
    assert out.risks[6:] == [
        "Large initiative with organizational readiness concerns",
        "High technical complexity with system compatibility issues",
        "More barriers than enablers identified",
    ]
