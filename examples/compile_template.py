""" Example: compile a built-in template and print its validation, plan and metrics as JSON. """
import json
import sys

from flowdef.logging_config import setup_logging
from flowdef.templates.registry import get_template, list_templates
from flowdef.workflow.compiler import compile_graph


def main():
    setup_logging()
    template_id = sys.argv[1] if len(sys.argv) > 1 else "purchase-approval-v1"

    print("Available templates:", ", ".join(t.id for t in list_templates()))
    compiled = compile_graph(get_template(template_id))

    print(json.dumps({
        "validation": compiled.validation.to_dict(),
        "plan": compiled.plan.to_dict(),
        "metrics": compiled.metrics.to_dict(),
    }, indent=2))

    for level, group in enumerate(compiled.plan.parallel_groups):
        print(f"level {level}: {', '.join(group)}")


if __name__ == '__main__':
    main()
