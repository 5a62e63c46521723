# src/ui/routes.py
# Page keys; the values double as sidebar labels.
HOME = "Home"
LOGIN = "Login"
JOBS = "Jobs"
JOB_DETAIL = "Job Details"
COURSES = "Courses"
COURSE_DETAIL = "Course Details"
POST_DETAIL = "Post Details"
MY_COURSES = "My Courses"
ADMIN_DASHBOARD = "Admin Dashboard"
ADMIN_JOBS = "Manage Jobs"
ADMIN_POSTS = "Manage Posts"
ADMIN_EMPLOYERS = "Manage Employers"

# where each role lands after login
ROLE_HOME = {
    "admin": ADMIN_DASHBOARD,
    "student": MY_COURSES,
    "employer": JOBS,
}
