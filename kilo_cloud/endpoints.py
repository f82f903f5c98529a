"""Kilo Cloud endpoint table.

tRPC procedures are grouped by router namespace and called as
``<namespace>.<name>``. REST endpoints live under the ``rest`` namespace.
When parameters are wrong, grep for ``Procedure`` in the cloud repository's
``src/routers`` to find the expected input shape.
"""

from shared.rpc import EndpointDescriptor

TRPC_ENDPOINTS = {
    "webhookTriggers": (
        EndpointDescriptor("list", "GET", "List all webhook triggers."),
        EndpointDescriptor("get", "GET", "Get webhook trigger details.", params="triggerId (string, required), organizationId (string, optional)"),
        EndpointDescriptor("listRequests", "GET", "List webhook requests.", params="triggerId (string, required), limit (number, optional)"),
        EndpointDescriptor("create", "POST", "Create webhook trigger.", params="triggerId (string, required), githubRepo (string, required), mode (string, required, one of: architect|code|ask|debug|orchestrator, default: code), model (string, required, e.g. minimax/minimax-m2.1:free), promptTemplate (string, required), profileId (string, required - fetch from agentProfiles.list first)"),
        EndpointDescriptor("update", "POST", "Update webhook trigger.", params="triggerId (string, required), isActive, githubRepo, mode, model, promptTemplate, etc."),
        EndpointDescriptor("delete", "POST", "Delete webhook trigger.", params="triggerId (string, required)"),
    ),
    "cloudAgent": (
        EndpointDescriptor("checkEligibility", "GET", "Check cloud agent eligibility."),
        EndpointDescriptor("prepareSession", "POST", "Prepare cloud agent session.", params="sessionId, mode, profileId, githubRepo"),
        EndpointDescriptor("getStreamTicket", "POST", "Get stream ticket for cloud agent session.", params="sessionId (string, required)"),
        EndpointDescriptor("getSessionStatus", "GET", "Get cloud agent session status.", params="sessionId (string, required)"),
        EndpointDescriptor("deleteSession", "POST", "Delete cloud agent session.", params="sessionId (string, required)"),
        EndpointDescriptor("getSession", "GET", "Get cloud agent session.", params="sessionId (string, required)"),
        EndpointDescriptor("listGitHubRepositories", "GET", "List GitHub repositories for cloud agent."),
        EndpointDescriptor("listGitLabRepositories", "GET", "List GitLab repositories for cloud agent."),
        EndpointDescriptor("interruptSession", "POST", "Interrupt cloud agent session.", params="sessionId (string, required)"),
        EndpointDescriptor("sendMessageStream", "POST", "Send message stream to cloud agent.", params="sessionId, message"),
        EndpointDescriptor("sendMessageV2", "POST", "Send message V2 to cloud agent.", params="sessionId, message"),
        EndpointDescriptor("initiateSessionStream", "POST", "Initiate cloud agent session stream.", params="githubRepo, prompt, mode, profileId"),
        EndpointDescriptor("initiateFromKilocodeSessionStream", "POST", "Initiate from Kilocode session stream.", params="kilocodeSessionId"),
        EndpointDescriptor("initiateFromKilocodeSessionV2", "POST", "Initiate from Kilocode session V2.", params="kilocodeSessionId, mode"),
        EndpointDescriptor("prepareLegacySession", "POST", "Prepare legacy cloud agent session.", params="githubRepo, prompt, mode, profileId"),
        EndpointDescriptor("checkDemoRepositoryFork", "GET", "Check demo repository fork status."),
    ),
    "cloudAgentNext": (
        EndpointDescriptor("prepareSession", "POST", "Prepare cloud agent next session.", params="sessionId, mode, profileId"),
        EndpointDescriptor("getStreamTicket", "POST", "Get stream ticket for cloud agent next session.", params="sessionId (string, required)"),
        EndpointDescriptor("getSession", "GET", "Get cloud agent next session.", params="sessionId (string, required)"),
        EndpointDescriptor("initiateFromPreparedSession", "POST", "Initiate from prepared session.", params="sessionId"),
        EndpointDescriptor("interruptSession", "POST", "Interrupt cloud agent next session.", params="sessionId (string, required)"),
        EndpointDescriptor("listGitHubRepositories", "GET", "List GitHub repositories for cloud agent next."),
        EndpointDescriptor("listGitLabRepositories", "GET", "List GitLab repositories for cloud agent next."),
        EndpointDescriptor("sendMessage", "POST", "Send message to cloud agent next.", params="sessionId, message"),
    ),
    "cliSessions": (
        EndpointDescriptor("list", "GET", "List all CLI sessions."),
        EndpointDescriptor("get", "GET", "Get CLI session details.", params="session_id (string, required)"),
        EndpointDescriptor("create", "POST", "Create CLI session.", params="sessionId, mode, model, profileId"),
        EndpointDescriptor("createV2", "POST", "Create CLI session V2.", params="sessionId, mode, model, profileId"),
        EndpointDescriptor("update", "POST", "Update CLI session.", params="sessionId, status, etc."),
        EndpointDescriptor("delete", "POST", "Delete CLI session.", params="sessionId (string, required)"),
        EndpointDescriptor("fork", "POST", "Fork CLI session.", params="sessionId, title"),
        EndpointDescriptor("forkForReview", "POST", "Fork CLI session for review.", params="sessionId, title"),
        EndpointDescriptor("search", "GET", "Search CLI sessions.", params="query"),
        EndpointDescriptor("share", "POST", "Share CLI session.", params="sessionId"),
        EndpointDescriptor("shareForWebhookTrigger", "POST", "Share CLI session for webhook trigger.", params="sessionId, triggerId"),
        EndpointDescriptor("getSessionMessages", "GET", "Get CLI session messages.", params="sessionId"),
        EndpointDescriptor("getSessionApiConversationHistory", "GET", "Get CLI session API conversation history.", params="sessionId"),
        EndpointDescriptor("getSessionGitState", "GET", "Get CLI session git state.", params="sessionId"),
        EndpointDescriptor("getByCloudAgentSessionId", "GET", "Get CLI session by cloud agent session ID.", params="cloudAgentSessionId"),
        EndpointDescriptor("linkCloudAgent", "POST", "Link cloud agent to CLI session.", params="sessionId, cloudAgentSessionId"),
    ),
    "cliSessionsV2": (
        EndpointDescriptor("list", "GET", "List all CLI sessions (v2)."),
        EndpointDescriptor("get", "GET", "Get CLI session details (v2).", params="sessionId (string, required)"),
        EndpointDescriptor("getSessionMessages", "GET", "Get CLI session V2 messages.", params="sessionId"),
        EndpointDescriptor("getByCloudAgentSessionId", "GET", "Get CLI session V2 by cloud agent session ID.", params="cloudAgentSessionId"),
        EndpointDescriptor("getWithRuntimeState", "GET", "Get CLI session V2 with runtime state.", params="sessionId"),
    ),
    "agentProfiles": (
        EndpointDescriptor("list", "GET", "List all agent profiles."),
        EndpointDescriptor("get", "GET", "Get agent profile details.", params="id (string, required)"),
        EndpointDescriptor("create", "POST", "Create agent profile.", params="name, envVars"),
        EndpointDescriptor("update", "POST", "Update agent profile.", params="id (string, required), name, envVars, etc."),
        EndpointDescriptor("delete", "POST", "Delete agent profile.", params="id (string, required)"),
        EndpointDescriptor("setVar", "POST", "Set agent profile variable.", params="id, key, value"),
        EndpointDescriptor("deleteVar", "POST", "Delete agent profile variable.", params="id, key"),
        EndpointDescriptor("setAsDefault", "POST", "Set agent profile as default.", params="id"),
        EndpointDescriptor("clearDefault", "POST", "Clear agent profile default."),
        EndpointDescriptor("setCommands", "POST", "Set agent profile commands.", params="id, commands"),
        EndpointDescriptor("listCombined", "GET", "List combined agent profiles."),
    ),
    "codeIndexing": (
        EndpointDescriptor("search", "GET", "Search code index.", params="query (string, required), organizationId, repositoryId"),
        EndpointDescriptor("getManifest", "GET", "Get code index manifest.", params="repositoryId (string, required)"),
        EndpointDescriptor("isEnabled", "GET", "Check if code indexing is enabled.", params="repositoryId (string, required)"),
        EndpointDescriptor("upsertByFile", "POST", "Upsert code index by file.", params="repositoryId, filePath, content"),
        EndpointDescriptor("delete", "POST", "Delete code index.", params="repositoryId (string, required)"),
    ),
    "codeIndexingCodeIndexing": (
        EndpointDescriptor("search", "GET", "Search code index.", params="query, organizationId, repositoryId"),
        EndpointDescriptor("getManifest", "GET", "Get code index manifest.", params="repositoryId"),
        EndpointDescriptor("getOrganizationStats", "GET", "Get code indexing organization stats."),
        EndpointDescriptor("getProjectFiles", "GET", "Get code indexing project files.", params="repositoryId"),
        EndpointDescriptor("delete", "POST", "Delete code index.", params="repositoryId"),
        EndpointDescriptor("deleteBeforeDate", "POST", "Delete code index before date.", params="date"),
    ),
    "organizations": (
        EndpointDescriptor("list", "GET", "List all organizations."),
        EndpointDescriptor("get", "GET", "Get organization details.", params="id (string, required)"),
        EndpointDescriptor("getUsageDetails", "GET", "Get organization usage details.", params="id (string, required)"),
        EndpointDescriptor("getSettings", "GET", "Get organization settings.", params="id (string, required)"),
        EndpointDescriptor("updateSettings", "POST", "Update organization settings.", params="id (string, required), settings"),
        EndpointDescriptor("listMembers", "GET", "List organization members.", params="id (string, required)"),
        EndpointDescriptor("inviteMember", "POST", "Invite member to organization.", params="id (string, required), email, role"),
        EndpointDescriptor("removeMember", "POST", "Remove member from organization.", params="id (string, required), userId"),
        EndpointDescriptor("getAuditLog", "GET", "Get organization audit log.", params="id (string, required)"),
        EndpointDescriptor("create", "POST", "Create organization.", params="name"),
    ),
    "organizationsOrganizationSubscription": (
        EndpointDescriptor("getByStripeSessionId", "GET", "Get subscription by Stripe session ID.", params="stripeSessionId"),
        EndpointDescriptor("getSubscriptionStripeUrl", "GET", "Get subscription Stripe URL.", params="organizationId"),
    ),
    "user": (
        EndpointDescriptor("getAuthProviders", "GET", "Get user auth providers."),
        EndpointDescriptor("generateApiToken", "POST", "Generate new API token."),
        EndpointDescriptor("getAutoTopUpPaymentMethod", "GET", "Get auto top-up payment method."),
        EndpointDescriptor("changeAutoTopUpPaymentMethod", "POST", "Change auto top-up payment method.", params="paymentMethodId"),
        EndpointDescriptor("removeAutoTopUpPaymentMethod", "POST", "Remove auto top-up payment method.", params="paymentMethodId"),
        EndpointDescriptor("toggleAutoTopUp", "POST", "Toggle auto top-up.", params="enabled"),
        EndpointDescriptor("updateAutoTopUpAmount", "POST", "Update auto top-up amount.", params="amount"),
        EndpointDescriptor("getCreditBlocks", "GET", "Get user credit blocks."),
        EndpointDescriptor("resetAPIKey", "POST", "Reset API key."),
        EndpointDescriptor("getAutocompleteMetrics", "GET", "Get autocomplete metrics."),
        EndpointDescriptor("linkAuthProvider", "POST", "Link auth provider.", params="provider"),
        EndpointDescriptor("unlinkAuthProvider", "POST", "Unlink auth provider.", params="provider"),
    ),
    "kiloPass": (
        EndpointDescriptor("getState", "GET", "Get Kilo Pass state."),
        EndpointDescriptor("createCheckoutSession", "POST", "Create checkout session.", params="priceId"),
        EndpointDescriptor("getCheckoutReturnState", "GET", "Get checkout return state.", params="sessionId"),
        EndpointDescriptor("getCustomerPortalUrl", "GET", "Get customer portal URL."),
        EndpointDescriptor("cancelSubscription", "POST", "Cancel subscription."),
        EndpointDescriptor("resumeSubscription", "POST", "Resume subscription."),
        EndpointDescriptor("scheduleChange", "POST", "Schedule subscription change.", params="priceId"),
        EndpointDescriptor("cancelScheduledChange", "POST", "Cancel scheduled change."),
        EndpointDescriptor("getScheduledChange", "GET", "Get scheduled change."),
        EndpointDescriptor("getAverageMonthlyUsageLast3Months", "GET", "Get average monthly usage last 3 months."),
        EndpointDescriptor("getFirstMonthPromoEligibility", "GET", "Get first month promo eligibility."),
    ),
    "byok": (
        EndpointDescriptor("list", "GET", "List all BYOK (Bring Your Own Key) entries."),
        EndpointDescriptor("create", "POST", "Create BYOK entry.", params="provider_id, api_key"),
        EndpointDescriptor("update", "POST", "Update BYOK entry.", params="id (string, required), api_key"),
        EndpointDescriptor("delete", "POST", "Delete BYOK entry.", params="id (string, required)"),
    ),
    "autoTriage": (
        EndpointDescriptor("listTicketsForUser", "GET", "List auto triage tickets for user."),
        EndpointDescriptor("getTicket", "GET", "Get auto triage ticket details.", params="ticketId (string, required)"),
        EndpointDescriptor("create", "POST", "Create auto triage ticket.", params="title, description, githubRepo"),
        EndpointDescriptor("checkDuplicates", "POST", "Check for duplicate auto triage tickets.", params="title (string, required)"),
    ),
    "autoFix": (
        EndpointDescriptor("listTicketsForUser", "GET", "List auto fix tickets for user."),
        EndpointDescriptor("getTicket", "GET", "Get auto fix ticket details.", params="ticketId (string, required)"),
        EndpointDescriptor("create", "POST", "Create auto fix request.", params="title, description, githubRepo, issueNumber"),
    ),
    "autoFixAutoFix": (
        EndpointDescriptor("listTicketsForUser", "GET", "List auto fix tickets for user."),
        EndpointDescriptor("getTicket", "GET", "Get auto fix ticket details.", params="ticketId"),
        EndpointDescriptor("cancel", "POST", "Cancel auto fix ticket.", params="ticketId"),
        EndpointDescriptor("retrigger", "POST", "Retrigger auto fix ticket.", params="ticketId"),
    ),
    "autoTriageAutoTriage": (
        EndpointDescriptor("listTicketsForUser", "GET", "List auto triage tickets for user."),
        EndpointDescriptor("getTicket", "GET", "Get auto triage ticket details.", params="ticketId"),
        EndpointDescriptor("retrigger", "POST", "Retrigger auto triage ticket.", params="ticketId"),
    ),
    "codeReviews": (
        EndpointDescriptor("listForUser", "GET", "List code reviews for user."),
        EndpointDescriptor("get", "GET", "Get code review details.", params="reviewId (string, required)"),
        EndpointDescriptor("requestReview", "POST", "Request code review.", params="githubRepo, prNumber"),
        EndpointDescriptor("cancel", "POST", "Cancel code review.", params="reviewId (string, required)"),
        EndpointDescriptor("retrigger", "POST", "Retrigger code review.", params="reviewId (string, required)"),
        EndpointDescriptor("getGitHubStatus", "GET", "Get GitHub status for code reviews."),
        EndpointDescriptor("getReviewConfig", "GET", "Get code review config."),
        EndpointDescriptor("saveReviewConfig", "POST", "Save code review config.", params="config"),
        EndpointDescriptor("toggleReviewAgent", "POST", "Toggle review agent.", params="enabled"),
        EndpointDescriptor("listGitHubRepositories", "GET", "List GitHub repositories for code reviews."),
    ),
    "appBuilder": (
        EndpointDescriptor("listProjects", "GET", "List app builder projects."),
        EndpointDescriptor("getProject", "GET", "Get app builder project details.", params="id (string, required)"),
        EndpointDescriptor("createProject", "POST", "Create app builder project.", params="name, template"),
        EndpointDescriptor("deploy", "POST", "Deploy app builder project.", params="projectId (string, required)"),
        EndpointDescriptor("checkEligibility", "GET", "Check app builder eligibility."),
        EndpointDescriptor("deleteProject", "POST", "Delete app builder project.", params="projectId"),
        EndpointDescriptor("deployProject", "POST", "Deploy app builder project.", params="projectId"),
        EndpointDescriptor("startSession", "POST", "Start app builder session.", params="projectId"),
        EndpointDescriptor("interruptSession", "POST", "Interrupt app builder session.", params="projectId"),
        EndpointDescriptor("sendMessage", "POST", "Send message to app builder.", params="projectId, message"),
        EndpointDescriptor("getPreviewUrl", "GET", "Get app builder preview URL.", params="projectId"),
        EndpointDescriptor("getImageUploadUrl", "GET", "Get image upload URL.", params="projectId"),
        EndpointDescriptor("generateCloneToken", "POST", "Generate clone token.", params="projectId"),
        EndpointDescriptor("triggerBuild", "POST", "Trigger app builder build.", params="projectId"),
        EndpointDescriptor("prepareLegacySession", "POST", "Prepare legacy session.", params="projectId"),
    ),
    "appReportedMessages": (
        EndpointDescriptor("createReport", "POST", "Create app reported message.", params="messageId, reason, details"),
    ),
    "deployments": (
        EndpointDescriptor("listDeployments", "GET", "List all deployments."),
        EndpointDescriptor("getDeployment", "GET", "Get deployment details.", params="id (string, required)"),
        EndpointDescriptor("createDeployment", "POST", "Create deployment.", params="platformIntegrationId, repositoryFullName, branch"),
        EndpointDescriptor("setEnvVar", "POST", "Set deployment environment variable.", params="deploymentId, key, value, isSecret"),
        EndpointDescriptor("deleteDeployment", "POST", "Delete deployment.", params="id (string, required)"),
        EndpointDescriptor("checkDeploymentEligibility", "GET", "Check deployment eligibility."),
        EndpointDescriptor("deleteEnvVar", "POST", "Delete deployment env var.", params="deploymentId, key"),
        EndpointDescriptor("renameEnvVar", "POST", "Rename deployment env var.", params="deploymentId, oldKey, newKey"),
        EndpointDescriptor("listEnvVars", "GET", "List deployment env vars.", params="deploymentId"),
        EndpointDescriptor("redeploy", "POST", "Redeploy.", params="deploymentId"),
        EndpointDescriptor("cancelBuild", "POST", "Cancel build.", params="deploymentId"),
        EndpointDescriptor("getBuildEvents", "GET", "Get build events.", params="deploymentId"),
    ),
    "githubApps": (
        EndpointDescriptor("listIntegrations", "GET", "List GitHub app integrations."),
        EndpointDescriptor("getInstallation", "GET", "Get GitHub app installation."),
        EndpointDescriptor("connectRepo", "POST", "Connect GitHub repository.", params="integrationId, repositoryFullName"),
        EndpointDescriptor("disconnectRepo", "POST", "Disconnect GitHub repository.", params="integrationId, repositoryFullName"),
        EndpointDescriptor("checkUserPendingInstallation", "GET", "Check user pending GitHub installation."),
        EndpointDescriptor("cancelPendingInstallation", "POST", "Cancel pending installation."),
        EndpointDescriptor("listRepositories", "GET", "List GitHub repositories."),
        EndpointDescriptor("listBranches", "GET", "List GitHub branches.", params="repositoryFullName"),
        EndpointDescriptor("refreshInstallation", "POST", "Refresh installation."),
        EndpointDescriptor("uninstallApp", "POST", "Uninstall GitHub app.", params="installationId"),
        EndpointDescriptor("devAddInstallation", "POST", "Dev add installation.", params="installationId"),
    ),
    "gitlab": (
        EndpointDescriptor("getInstallation", "GET", "Get GitLab installation."),
        EndpointDescriptor("getAuthUrl", "GET", "Get GitLab auth URL.", params="state (string, required)"),
        EndpointDescriptor("disconnect", "POST", "Disconnect GitLab."),
        EndpointDescriptor("disconnectOrg", "POST", "Disconnect GitLab organization.", params="organizationId"),
        EndpointDescriptor("getIntegration", "GET", "Get GitLab integration."),
        EndpointDescriptor("listRepositories", "GET", "List GitLab repositories."),
        EndpointDescriptor("listBranches", "GET", "List GitLab branches.", params="projectId"),
        EndpointDescriptor("refreshRepositories", "POST", "Refresh GitLab repositories."),
    ),
    "slack": (
        EndpointDescriptor("getInstallation", "GET", "Get Slack installation."),
        EndpointDescriptor("getOAuthUrl", "GET", "Get Slack OAuth URL."),
        EndpointDescriptor("disconnect", "POST", "Disconnect Slack."),
        EndpointDescriptor("testConnection", "POST", "Test Slack connection."),
        EndpointDescriptor("sendTestMessage", "POST", "Send test Slack message."),
        EndpointDescriptor("updateModel", "POST", "Update Slack model.", params="model"),
        EndpointDescriptor("uninstallApp", "POST", "Uninstall Slack app."),
        EndpointDescriptor("devRemoveDbRowOnly", "POST", "Dev remove DB row only."),
    ),
    "securityAgent": (
        EndpointDescriptor("listFindings", "GET", "List security findings."),
        EndpointDescriptor("getFinding", "GET", "Get security finding details.", params="id (string, required)"),
        EndpointDescriptor("dismissFinding", "POST", "Dismiss security finding.", params="findingId, reason"),
        EndpointDescriptor("getConfig", "GET", "Get security agent config."),
        EndpointDescriptor("getRepositories", "GET", "Get security agent repositories."),
        EndpointDescriptor("getStats", "GET", "Get security agent stats."),
        EndpointDescriptor("getPermissionStatus", "GET", "Get security agent permission status."),
        EndpointDescriptor("getOrphanedRepositories", "GET", "Get orphaned repositories."),
        EndpointDescriptor("getAutoDismissEligible", "GET", "Get auto-dismiss eligible findings."),
        EndpointDescriptor("autoDismissEligible", "GET", "Get auto dismiss eligible findings."),
        EndpointDescriptor("saveConfig", "POST", "Save security agent config.", params="config"),
        EndpointDescriptor("setEnabled", "POST", "Set security agent enabled.", params="enabled"),
        EndpointDescriptor("startAnalysis", "POST", "Start security analysis.", params="repositoryId"),
        EndpointDescriptor("triggerSync", "POST", "Trigger security sync.", params="repositoryId"),
        EndpointDescriptor("getAnalysis", "GET", "Get security analysis.", params="repositoryId"),
        EndpointDescriptor("getLastSyncTime", "GET", "Get last sync time.", params="repositoryId"),
        EndpointDescriptor("listAnalysisJobs", "GET", "List analysis jobs."),
        EndpointDescriptor("deleteFindingsByRepository", "POST", "Delete findings by repository.", params="repositoryId"),
    ),
    "personalAutoFix": (
        EndpointDescriptor("getAutoFixConfig", "GET", "Get personal auto fix config."),
        EndpointDescriptor("listGitHubRepositories", "GET", "List personal auto fix GitHub repositories."),
        EndpointDescriptor("listTickets", "GET", "List personal auto fix tickets."),
        EndpointDescriptor("saveAutoFixConfig", "POST", "Save personal auto fix config.", params="config"),
        EndpointDescriptor("toggleAutoFixAgent", "POST", "Toggle personal auto fix agent.", params="enabled"),
        EndpointDescriptor("cancelFix", "POST", "Cancel personal auto fix.", params="ticketId"),
        EndpointDescriptor("retriggerFix", "POST", "Retrigger personal auto fix.", params="ticketId"),
    ),
    "personalAutoTriage": (
        EndpointDescriptor("getAutoTriageConfig", "GET", "Get personal auto triage config."),
        EndpointDescriptor("getGitHubStatus", "GET", "Get personal auto triage GitHub status."),
        EndpointDescriptor("listGitHubRepositories", "GET", "List personal auto triage GitHub repositories."),
        EndpointDescriptor("listTickets", "GET", "List personal auto triage tickets."),
        EndpointDescriptor("saveAutoTriageConfig", "POST", "Save personal auto triage config.", params="config"),
        EndpointDescriptor("toggleAutoTriageAgent", "POST", "Toggle personal auto triage agent.", params="enabled"),
        EndpointDescriptor("retryTicket", "POST", "Retry personal auto triage ticket.", params="ticketId"),
    ),
    "userFeedback": (
        EndpointDescriptor("create", "POST", "Create user feedback.", params="message, type"),
    ),
    "test": (
        EndpointDescriptor("hello", "GET", "Test endpoint."),
    ),
}

REST_ENDPOINTS = {
    "rest": (
        EndpointDescriptor("listRepositories", "GET", "List repositories connected to the account.", params="limit (number, optional)", path="/repositories"),
        EndpointDescriptor("getRepository", "GET", "Get repository details.", params="id (string, required)", path="/repositories/{id}"),
        EndpointDescriptor("getSessionLog", "GET", "Download the plain-text log of a CLI session.", params="sessionId (string, required)", path="/cli-sessions/{sessionId}/log", raw=True),
        EndpointDescriptor("deleteRepository", "DELETE", "Disconnect a repository.", params="id (string, required)", path="/repositories/{id}"),
    ),
}

ENDPOINTS = {**TRPC_ENDPOINTS, **REST_ENDPOINTS}
