USER_PROFILE_OPERATION = "getUserProfile"
USER_PROFILE_QUERY = """
query getUserProfile($username: String!) {
    allQuestionsCount {
        difficulty
        count
    }
    matchedUser(username: $username) {
        username
        submitStats {
            acSubmissionNum {
                difficulty
                count
                submissions
            }
        }
        profile {
            ranking
        }
    }
}
"""

RECENT_SUBMISSIONS_OPERATION = "getRecentSubmissions"
RECENT_SUBMISSIONS_QUERY = """
query getRecentSubmissions($username: String!, $limit: Int) {
    recentSubmissionList(username: $username, limit: $limit) {
        title
        titleSlug
        timestamp
        statusDisplay
        lang
    }
}
"""
