class InvalidArgument(ValueError):
    '''Error that is raised if an interval operation receives an illegal argument.'''

    def __init__(self, msg: str = None, argument=None):
        super().__init__(msg)
        self._argument = argument

    @property
    def argument(self):
        '''The offending value, if any.'''
        return self._argument
