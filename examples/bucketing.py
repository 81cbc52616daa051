'''
Assign random measurements to half-open buckets.
'''
import numpy as np

from numinterval import Interval


BUCKETS = [
    Interval('(-INF, 0)'),
    Interval('[0, 10)'),
    Interval('[10, 100)'),
    Interval('[100, INF)'),
]


def bucket(x):
    for b in BUCKETS:
        if x in b:
            return b
    raise ValueError('No bucket for %s' % x)


def main():
    rng = np.random.default_rng(0)
    for x in rng.normal(20, 50, size=10).round(2):
        print('%8.2f -> %s' % (x, bucket(x)))


if __name__ == '__main__':
    main()
