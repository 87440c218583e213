import pytest

from internmatch.dataset import load_dataset
from internmatch.engine import Matcher

SAMPLE = [
    {"id": 1, "title": "Dev Intern", "location": "Bangalore", "education": "B.Tech",
     "sector": "IT", "skills": ["React", "Node"]},
    {"id": 2, "title": "Remote Dev", "location": "Remote", "education": "B.Tech",
     "sector": "IT", "skills": ["React"]},
]

CATALOG = SAMPLE + [
    {"id": 3, "title": "Data Intern", "company": "Insightful", "location": "Mumbai",
     "sector": "Finance", "education": "B.Sc", "skills": "Excel; SQL | Power BI"},
    {"id": 4, "job_title": "ML Intern", "org": "NeuroWorks", "city": "Hyderabad",
     "domain": "Artificial Intelligence", "min_education": "M.Tech",
     "skills": ["Python", "PyTorch"]},
    {"id": 5, "title": "Ops Intern", "location": "Bangalore Urban", "sector": "IT Services",
     "education": "BE", "skills": []},
]


@pytest.fixture
def sample_raw():
    return [dict(d) for d in SAMPLE]


@pytest.fixture
def catalog_raw():
    return [dict(d) for d in CATALOG]


@pytest.fixture
def records(catalog_raw):
    return load_dataset(catalog_raw)


@pytest.fixture
def matcher(catalog_raw):
    m = Matcher()
    m.load_records(catalog_raw)
    return m
