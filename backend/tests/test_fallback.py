from travel_advisor.graph.normalize import normalize_params
from travel_advisor.graph.postprocess.fallback import synthesize_plan


def test_same_params_give_identical_plans():
    params = normalize_params(
        query="somewhere warm",
        preferences=["adventure", "cultural"],
        regions=["puerto-plata"],
        budget="Luxury",
        companions="Friends",
    )
    first = synthesize_plan(params)
    second = synthesize_plan(params)
    assert first == second
    assert first.model_dump_json() == second.model_dump_json()


def test_family_punta_cana_summary():
    params = normalize_params(
        query="",
        preferences=["family"],
        regions=["punta-cana"],
        budget="mid-range",
        companions="family",
    )
    summary = synthesize_plan(params).summary
    assert "family vacation" in summary
    assert "Punta Cana" in summary
    assert "mid-range" in summary


def test_defaults_without_selections():
    plan = synthesize_plan(normalize_params(query="ideas?"))
    assert plan.summary == (
        "Discover the perfect vacation in the Dominican Republic with a mid-range budget, "
        "ideal for travelers."
    )


def test_descriptors():
    plan = synthesize_plan(normalize_params(
        preferences=["luxury", "adventure"],
        regions=["samana", "punta-cana"],
        budget="LUXURY",
        companions="My Partner",
    ))
    assert plan.summary == (
        "Discover the perfect adventure-filled and luxurious vacation in Punta Cana and Samaná "
        "with a luxury budget, ideal for my partner."
    )
    assert "Exceptional value for luxury travelers" in plan.pros_and_cons.pros


def test_all_region_means_whole_country():
    plan = synthesize_plan(normalize_params(regions=["all", "samana"]))
    assert "in the Dominican Republic" in plan.summary


def test_every_list_is_populated():
    plan = synthesize_plan(normalize_params(query="x"))
    recs = plan.recommendations
    for items in (recs.places, recs.activities, recs.accommodations, recs.restaurants):
        assert 4 <= len(items) <= 6
        assert all(i.name for i in items)
    assert plan.safety_tips
    assert plan.pros_and_cons.pros and plan.pros_and_cons.cons
