"""
Unit tests for the Storage Manager.
"""

import json
import os
import tempfile
import pandas as pd
import pytest
from reviewpulse.utils.storage import KEYWORD_TABLE_COLUMNS, StorageManager


@pytest.fixture
def storage():
    with tempfile.TemporaryDirectory() as tmpdir:
        yield StorageManager(
            data_root=os.path.join(tmpdir, "data"),
            output_root=os.path.join(tmpdir, "output")
        )


def report_with(keyword_frequency, positive=None, negative=None, recent=None):
    return {
        "analysis": {
            "keyword_frequency": keyword_frequency,
            "top_positive_keywords": positive or {},
            "top_negative_keywords": negative or {},
            "recent_issues": recent or {},
        }
    }


def test_directories_created(storage):
    assert os.path.isdir(storage.raw_dir)
    assert os.path.isdir(storage.output_root)


def test_raw_reviews_round_trip(storage):
    path = storage.raw_reviews_path("com.example", "ios")
    records = [{"id": "1", "text": "fine", "score": 4, "updated": "2024-06-01"}]

    with open(path, "w") as f:
        json.dump(records, f)

    assert storage.load_raw_reviews(path) == records


def test_load_missing_file_returns_none(storage):
    assert storage.load_raw_reviews(os.path.join(storage.raw_dir, "missing.json")) is None


def test_load_non_list_returns_none(storage):
    path = os.path.join(storage.raw_dir, "object.json")
    with open(path, "w") as f:
        json.dump({"reviews": []}, f)

    assert storage.load_app_listings(path) is None


def test_load_invalid_json_returns_none(storage):
    path = os.path.join(storage.raw_dir, "broken.json")
    with open(path, "w") as f:
        f.write("not json{{{")

    assert storage.load_raw_reviews(path) is None


def test_save_report(storage):
    path = storage.save_report({"app_id": "x", "total_reviews_analyzed": 0}, "reviews_android_x")

    assert path.endswith("reviews_android_x.json")
    with open(path) as f:
        assert json.load(f)["app_id"] == "x"


def test_save_keyword_table(storage):
    report = report_with(
        {"crash": 3, "login": 2, "great": 2},
        positive={"great": 2},
        negative={"crash": 3, "login": 2},
        recent={"crash": 1}
    )

    path = storage.save_keyword_table(report, "reviews_android_x")
    df = pd.read_csv(path)

    assert list(df.columns) == KEYWORD_TABLE_COLUMNS
    assert df["Keyword"].tolist() == ["crash", "login", "great"]
    assert df["Count"].tolist() == [3, 2, 2]
    assert df["Positive"].tolist() == [False, False, True]
    assert df["Negative"].tolist() == [True, True, False]
    assert df["Recent Issues"].tolist() == [1, 0, 0]


def test_save_empty_keyword_table(storage):
    path = storage.save_keyword_table(report_with({}), "empty")
    df = pd.read_csv(path)

    assert df.empty
    assert list(df.columns) == KEYWORD_TABLE_COLUMNS


# Run tests if executed directly
if __name__ == "__main__":
    pytest.main([__file__, "-v"])
