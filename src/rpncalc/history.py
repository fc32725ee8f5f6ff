from collections import deque
from datetime import datetime
from typing import NamedTuple


class CalculationRecord(NamedTuple):
    expression: str
    result: float
    timestamp: datetime


class History:
    '''
    Successful calculations of a session, most recent first.

    Only the last MAXLEN are kept; older ones fall off the end.
    '''

    MAXLEN = 10

    def __init__(self, maxlen=None):
        self.records = deque(maxlen=type(self).MAXLEN if maxlen is None
                             else maxlen)

    def add(self, expression, result, timestamp=None):
        '''
        Record a calculation, and return the record.
        '''
        record = CalculationRecord(expression.strip(),
                                   result,
                                   timestamp or datetime.now())
        self.records.appendleft(record)
        return record

    def clear(self):
        self.records.clear()

    def recall(self, n):
        '''
        Return the nth most recent record, counting from 1.
        '''
        if not 1 <= n <= len(self.records):
            raise IndexError('No history entry {}'.format(n))
        return self.records[n - 1]

    def __getitem__(self, index):
        return self.records[index]

    def __iter__(self):
        return iter(self.records)

    def __len__(self):
        return len(self.records)
