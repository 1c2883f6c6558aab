"""
Unit tests for the review statistics calculator.
"""

from app.services.review_stats import calculate_stats


def test_empty_reviews():
    stats = calculate_stats([])

    assert stats.average_rating == 0
    assert stats.selection_rate == 0
    assert stats.total_reviews == 0
    assert stats.difficulty_distribution == {"Easy": 0, "Medium": 0, "Hard": 0}
    assert stats.job_type_distribution == {}
    assert stats.location_distribution == {}


def test_selected_and_rejected_scenario():
    reviews = [
        {"result": "Selected", "rating": {"overall": 4}},
        {"result": "Rejected", "rating": {"overall": 2}},
    ]

    stats = calculate_stats(reviews)

    assert stats.average_rating == 3.0
    assert stats.selection_rate == 50.0
    assert stats.total_reviews == 2


def test_average_ignores_reviews_without_rating():
    reviews = [
        {"rating": {"overall": 5}},
        {"rating": {"overall": 4}},
        {"rating": {}},
        {},
    ]

    stats = calculate_stats(reviews)

    # Mean over the two rated reviews only
    assert stats.average_rating == 4.5
    assert stats.total_reviews == 4


def test_rates_are_rounded_to_one_decimal():
    reviews = [{"result": "Selected", "rating": {"overall": 5}}] + [
        {"result": "Rejected", "rating": {"overall": 4}} for _ in range(2)
    ]

    stats = calculate_stats(reviews)

    assert stats.selection_rate == 33.3
    assert stats.average_rating == 4.3


def test_difficulty_is_preseeded_and_unknown_values_dropped():
    reviews = [
        {"difficulty": "Hard"},
        {"difficulty": "Hard"},
        {"difficulty": "Very Hard"},
        {},
    ]

    stats = calculate_stats(reviews)

    assert stats.difficulty_distribution == {"Easy": 0, "Medium": 0, "Hard": 2}


def test_job_type_and_location_only_count_present_values(sample_reviews):
    stats = calculate_stats(sample_reviews + [{"job_type": "", "location": None}])

    assert stats.job_type_distribution == {"Full-time": 2, "Internship": 1}
    assert stats.location_distribution == {"Bangalore, India": 2, "Hyderabad, India": 1}


def test_bounds_hold(sample_reviews):
    stats = calculate_stats(sample_reviews)

    assert 0 <= stats.average_rating <= 5
    assert 0 <= stats.selection_rate <= 100


def test_same_input_same_output(sample_reviews):
    first = calculate_stats(sample_reviews)
    second = calculate_stats(sample_reviews)

    assert first == second
    assert first.model_dump() == second.model_dump()


def test_non_string_categories_and_ratings_are_skipped():
    reviews = [
        {"difficulty": ["Hard"], "job_type": ["Full-time"], "location": {"city": "Pune"},
         "rating": {"overall": "4"}},
        {"difficulty": "Hard", "job_type": "Full-time", "location": "Pune", "rating": {"overall": 2}},
    ]

    stats = calculate_stats(reviews)

    assert stats.difficulty_distribution == {"Easy": 0, "Medium": 0, "Hard": 1}
    assert stats.job_type_distribution == {"Full-time": 1}
    assert stats.location_distribution == {"Pune": 1}
    assert stats.average_rating == 2.0
    assert stats.total_reviews == 2
