"""
Shared pytest fixtures for the listings processor tests.
"""

import pytest
import numpy as np
import pandas as pd


@pytest.fixture
def scenario_listings():
    """Three listings, two hosts; the worked example used across tests."""
    return pd.DataFrame({
        'id': [10, 11, 12],
        'price': ['$200', '$100', '$50'],
        'bedrooms': [2, 1, 1],
        'review_scores_rating': [4.5, 3.0, 5.0],
        'host_id': [1, 1, 2],
        'host_name': ['A', 'A', 'B'],
    })


@pytest.fixture
def messy_listings():
    """Listings with the formatting and gaps seen in real exports."""
    return pd.DataFrame({
        'id': [1, 2, 3, 4, 5, 6],
        'price': ['$1,250.00', '$80', None, 'call us', 95.5, '$0'],
        'bedrooms': [3, 0, 2, None, 'two', 1],
        'review_scores_rating': [4.9, None, 3.2, 4.0, 'n/a', 5.0],
        'host_id': [7, '7', np.nan, -3, 9, True],
        'host_name': ['Maya', 'Maya', 'Noor', 'Ivo', 'Ines', 'Zoe'],
    }, dtype=object)


@pytest.fixture
def listings_csv(tmp_path):
    """Listings CSV on disk, same content as ``scenario_listings`` plus a blank cell."""
    path = tmp_path / "listings.csv"
    path.write_text(
        "id,price,bedrooms,review_scores_rating,host_id,host_name,instant_bookable\n"
        '10,"$200",2,4.5,1,A,true\n'
        '11,"$100",1,3.0,1,A,false\n'
        '12,"$50",1,5.0,2,B,\n',
        encoding="utf-8",
    )
    return path
