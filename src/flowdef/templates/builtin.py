""" Built-in workflow templates, written as editor graphs in YAML. """

from ..workflow.compiler import load_visual_graph
from ..workflow.models import VisualGraph
from .registry import register_template

PURCHASE_APPROVAL_YAML = """
nodes:
  - id: start
    type: start
    position: { x: 100, y: 100 }
    data: { label: Purchase Request Started }
  - id: form
    type: form
    position: { x: 100, y: 200 }
    data:
      label: Purchase Request Form
      config: { formId: purchase-request, required: true, timeout: 7 days }
  - id: ai-screening
    type: ai-agent
    position: { x: 100, y: 300 }
    data:
      label: AI Pre-screening
      config: { agentId: purchase-screener, autoApprove: true, threshold: 1000 }
  - id: budget-check
    type: conditional
    position: { x: 100, y: 400 }
    data: { label: Budget Check }
  - id: manager-approval
    type: approval
    position: { x: 300, y: 500 }
    data:
      label: Manager Approval
      config: { approvers: ["${requester.manager}"], timeout: 2 days }
  - id: director-approval
    type: approval
    position: { x: 500, y: 500 }
    data:
      label: Director Approval
      config: { approvers: ["${requester.department.director}"], timeout: 3 days }
  - id: finance-approval
    type: approval
    position: { x: 700, y: 500 }
    data:
      label: Finance Approval
      config: { approvers: [finance-team], timeout: 2 days }
  - id: procurement-task
    type: task
    position: { x: 400, y: 600 }
    data:
      label: Procurement Processing
      config: { assignee: procurement-team }
  - id: notification
    type: task
    position: { x: 400, y: 700 }
    data:
      label: Notify Requester
      config: { type: notification, template: purchase-complete }
  - id: end
    type: end
    position: { x: 400, y: 800 }
    data: { label: Purchase Complete }

edges:
  - { id: e1, source: start, target: form }
  - { id: e2, source: form, target: ai-screening }
  - { id: e3, source: ai-screening, target: budget-check, data: { label: Passed AI screening } }
  - id: e4
    source: budget-check
    target: manager-approval
    type: conditional
    data: { label: "Amount < $1,000", condition: "amount < 1000" }
  - id: e5
    source: budget-check
    target: director-approval
    type: conditional
    data: { label: "Amount $1,000 - $10,000", condition: "amount >= 1000 && amount < 10000" }
  - id: e6
    source: budget-check
    target: finance-approval
    type: conditional
    data: { label: "Amount >= $10,000", condition: "amount >= 10000" }
  - { id: e7, source: manager-approval, target: procurement-task, data: { label: Approved } }
  - { id: e8, source: director-approval, target: procurement-task, data: { label: Approved } }
  - { id: e9, source: finance-approval, target: procurement-task, data: { label: Approved } }
  - { id: e10, source: procurement-task, target: notification }
  - { id: e11, source: notification, target: end }
"""

EXPENSE_REPORT_YAML = """
nodes:
  - { id: start, type: start, position: { x: 100, y: 100 }, data: { label: Expense Report Started } }
  - id: expense-form
    type: form
    position: { x: 100, y: 200 }
    data: { label: Expense Report Form, config: { formId: expense-report } }
  - id: ai-validation
    type: ai-agent
    position: { x: 100, y: 300 }
    data: { label: AI Receipt Validation, config: { agentId: expense-validator } }
  - { id: amount-check, type: conditional, position: { x: 100, y: 400 }, data: { label: Amount Check } }
  - { id: auto-approve, type: task, position: { x: 0, y: 500 }, data: { label: Auto Approve } }
  - { id: manager-approval, type: approval, position: { x: 200, y: 500 }, data: { label: Manager Approval } }
  - { id: finance-approval, type: approval, position: { x: 400, y: 500 }, data: { label: Finance Approval } }
  - { id: policy-violation, type: task, position: { x: 300, y: 350 }, data: { label: Policy Violation Review } }
  - { id: reimbursement, type: task, position: { x: 200, y: 600 }, data: { label: Process Reimbursement } }
  - { id: accounting, type: task, position: { x: 200, y: 700 }, data: { label: Accounting Entry } }
  - { id: notification, type: task, position: { x: 200, y: 800 }, data: { label: Notify Employee } }
  - { id: end, type: end, position: { x: 200, y: 900 }, data: { label: Expense Processed } }

edges:
  - { id: e1, source: start, target: expense-form }
  - { id: e2, source: expense-form, target: ai-validation }
  - { id: e3, source: ai-validation, target: amount-check, data: { label: Validation Passed } }
  - { id: e4, source: ai-validation, target: policy-violation, data: { label: Policy Violation Detected } }
  - id: e5
    source: amount-check
    target: auto-approve
    type: conditional
    data: { label: "Amount < $500", condition: "totalAmount < 500" }
  - id: e6
    source: amount-check
    target: manager-approval
    type: conditional
    data: { label: "Amount $500-$2000", condition: "totalAmount >= 500 && totalAmount < 2000" }
  - id: e7
    source: amount-check
    target: finance-approval
    type: conditional
    data: { label: "Amount >= $2000", condition: "totalAmount >= 2000" }
  - { id: e8, source: auto-approve, target: reimbursement, data: { label: Approved } }
  - { id: e9, source: manager-approval, target: reimbursement, data: { label: Approved } }
  - { id: e10, source: finance-approval, target: reimbursement, data: { label: Approved } }
  - { id: e11, source: policy-violation, target: manager-approval, data: { label: Resolved } }
  - { id: e12, source: reimbursement, target: accounting }
  - { id: e13, source: accounting, target: notification }
  - { id: e14, source: notification, target: end }
"""


@register_template(
    "purchase-approval-v1",
    "Purchase Approval Workflow",
    "Multi-level purchase approval with budget-based routing and AI pre-screening",
)
def purchase_approval() -> VisualGraph:
    return load_visual_graph(PURCHASE_APPROVAL_YAML)


@register_template(
    "expense-report-v1",
    "Expense Report Workflow",
    "Expense report processing with AI validation and approval routing",
    category="data-collection",
)
def expense_report() -> VisualGraph:
    return load_visual_graph(EXPENSE_REPORT_YAML)
