""" Exception types raised by flowdef. """

from typing import List


class FlowdefError(Exception):
    """ Base class for all flowdef errors. """


class DefinitionError(FlowdefError, ValueError):
    """ A definition or graph document has the wrong shape (duplicate ids, bad types). """


class WorkflowValidationError(FlowdefError):
    """ Raised by a strict compile when the structural validator reports errors. """

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__("Workflow is not valid: " + "; ".join(self.errors))


class TemplateNotFoundError(FlowdefError, KeyError):
    """ Unknown template id. """
