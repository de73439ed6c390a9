# pension_roster/utils/columns.py

# Employee interchange fields (JSON keys and CSV headers)
EMP_ID = "id"
EMP_FIRST_NAME = "firstName"
EMP_LAST_NAME = "lastName"
EMP_EMPLOYMENT_DATE = "employmentDate"
EMP_YEARLY_SALARY = "yearlySalary"
EMP_PENSION_PLAN = "pensionPlan"

# Pension plan sub-record fields
PLAN_REFERENCE_NUMBER = "planReferenceNumber"
PLAN_ENROLLMENT_DATE = "enrollmentDate"
PLAN_MONTHLY_CONTRIBUTION = "monthlyContribution"

REQUIRED_EMPLOYEE_COLUMNS = [
    EMP_ID,
    EMP_FIRST_NAME,
    EMP_LAST_NAME,
    EMP_EMPLOYMENT_DATE,
    EMP_YEARLY_SALARY,
]

PLAN_COLUMNS = [
    PLAN_REFERENCE_NUMBER,
    PLAN_ENROLLMENT_DATE,
    PLAN_MONTHLY_CONTRIBUTION,
]

# Output file names
ALL_EMPLOYEES_FILE = "all_employees.json"
UPCOMING_ENROLLEES_FILE = "upcoming_enrollees.json"
