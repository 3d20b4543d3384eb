import numpy as np

from backend.venture_matching.models.match_result import FACTORS

BUCKETS = ("0-40", "40-60", "60-80", "80-100")
# the last edge is past 100 so a perfect score lands in the top bucket
BUCKET_EDGES = (0, 40, 60, 80, 101)


def summarize(matches):
    """
    Aggregate a computed match set for dashboard summaries: count, mean
    overall score, a bucketed histogram and the mean of each matching factor.
    Pure; the input list isn't touched.
    """
    if not matches:
        return {
            "count": 0,
            "averageScore": 0.0,
            "distribution": {bucket: 0 for bucket in BUCKETS},
            "factorAverages": {name: 0.0 for name in FACTORS},
        }

    scores = np.array([m.match_score for m in matches], dtype=float)
    factors = np.array([[m.matching_factors[name] for name in FACTORS] for m in matches], dtype=float)
    counts, _ = np.histogram(scores, bins=BUCKET_EDGES)
    return {
        "count": int(scores.size),
        "averageScore": round(float(scores.mean()), 2),
        "distribution": {bucket: int(n) for bucket, n in zip(BUCKETS, counts)},
        "factorAverages": {
            name: round(float(value), 2) for name, value in zip(FACTORS, factors.mean(axis=0))
        },
    }
