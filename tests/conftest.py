"""Shared fixtures: a sample profile page, a model reply, and a fake OpenAI client."""

import copy
from types import SimpleNamespace

import pytest

from profile_analyzer.profile.extractor import extract_profile

PROFILE_HTML = """<!DOCTYPE html>
<html>
<head><title>Jane D. - Python Developer - Upwork Freelancer from Berlin, Germany</title></head>
<body>
<header class="profile-header">
  <h2 itemprop="name"> Jane   D. </h2>
  <span class="location">Berlin,
     Germany</span>
</header>
<section class="air3-card-section">
  <h2>Senior Python Developer | Web Scraping &amp; Data Pipelines</h2>
  <h3 class="h5 nowrap">$45.00/hr</h3>
  <div class="job-success-score">98% Job Success</div>
  <span class="text-pre-line break">I build reliable
     data pipelines.

Hire me for scraping work.</span>
</section>
<section class="cfe-ui-profile-summary-stats">
  <div class="stat-amount">$10K+</div>
  <div class="stat-amount">25</div>
  <div class="stat-amount">1,200</div>
  <p>Avg. response time: 2 hours</p>
</section>
<section class="skills">
  <span class="skill-name"> Python </span>
  <span class="skill-name">Web Scraping</span>
  <span class="skill-name">   </span>
  <span class="skill-name">FastAPI</span>
</section>
<section class="work-history">
  <div class="assignments-item">
    <h5><a href="#">Build a product scraper</a></h5>
    <div class="air3-rating"><strong>5.0</strong></div>
    <div class="feedback"><span>Great   work,
      fast delivery</span></div>
    <span class="text-base-sm text-stone">Jan 2023 - Mar 2023</span>
    <div class="text-light-on-inverse"><strong>$40.00</strong><span>/hr</span><strong>120</strong><span>hours</span></div>
  </div>
  <div class="assignments-item">
    <h5><a href="#">Logo design</a></h5>
    <span class="text-base-sm text-stone">Feb 2024</span>
    <div class="text-light-on-inverse"><strong>$500.00</strong></div>
  </div>
  <div class="assignments-item">
    <h5><a href="#">Data cleanup</a></h5>
    <div class="air3-rating"><strong>No feedback given</strong></div>
    <span class="text-base-sm text-stone">Apr 2024 - </span>
    <div class="text-light-on-inverse"><strong>$150.00</strong></div>
  </div>
</section>
<section class="portfolio">
  <div class="portfolio-v2-shelf-thumbnail">
    <img src="https://example.com/shop.png">
    <a href="#">E-commerce Scraper</a>
    <div class="mt-3x">Scraped one million
       products daily</div>
  </div>
  <div class="portfolio-v2-shelf-thumbnail">
    <a href="#">ETL Dashboard</a>
  </div>
</section>
</body>
</html>
"""

MODEL_PAYLOAD = {
    "profile_overview": {
        "score": 78,
        "job_success_score": 50,
        "market_fit": "82",
        "hourly_rate": {"current": 999, "recommended": "$55-65/hr", "market_average": 52.5},
    },
    "bio_analysis": {
        "current_bio": "A completely different bio invented by the model",
        "recommended_length": "150-250 words",
        "score": 60,
        "strengths": ["Clear niche", "Mentions outcomes"],
        "weaknesses": ["Too short"],
        "improvement_suggestions": {
            "opening_hook": {
                "current": "I build reliable data pipelines.",
                "recommended": "I turn messy websites into clean datasets.",
                "reason": "Leads with client value",
            },
            "value_proposition": {"current": "", "recommended": "Add results", "reason": "Proof"},
            "expertise_highlight": {"current": "", "recommended": "List tools", "reason": "Keywords"},
        },
    },
    "improvements": {
        "high_priority": [
            {"area": "Bio", "current": "Short", "recommended": "Expand", "impact": "Higher conversion"},
        ],
        "quick_wins": [
            {"title": "Refresh skills", "actions": ["Add Playwright", "Add Pandas"]},
        ],
        "long_term": {
            "30_days": ["Publish two portfolio pieces"],
            "60_90_days": ["Raise rate to $55"],
            "90_plus_days": ["Target enterprise clients"],
        },
    },
}


class FakeCompletions:
    def __init__(self, content=None, error=None):
        self.content = content
        self.error = error
        self.calls = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


class FakeClient:
    """Stands in for AsyncOpenAI: chat.completions.create and close are used."""

    def __init__(self, content=None, error=None):
        self.completions = FakeCompletions(content=content, error=error)
        self.chat = SimpleNamespace(completions=self.completions)
        self.closed = False

    async def close(self):
        self.closed = True


@pytest.fixture
def profile_html():
    return PROFILE_HTML


@pytest.fixture
def profile_record():
    return extract_profile(PROFILE_HTML)


@pytest.fixture
def model_payload():
    return copy.deepcopy(MODEL_PAYLOAD)


@pytest.fixture
def make_client():
    return FakeClient
